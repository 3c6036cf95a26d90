"""Core infrastructure: configuration, logging, errors and state."""
