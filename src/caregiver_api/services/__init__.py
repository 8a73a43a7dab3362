"""Application services and persistence interfaces."""
