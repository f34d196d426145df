"""Domain models, errors and settings."""
