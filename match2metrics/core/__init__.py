"""Core configuration and value objects."""
