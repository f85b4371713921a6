"""Configuration: models, settings loading, and logging setup."""
