"""Domain models and rules."""
