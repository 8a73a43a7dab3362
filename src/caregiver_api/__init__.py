"""Caregiver coordination API."""
