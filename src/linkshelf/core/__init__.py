"""Core utilities: configuration, logging and concurrency helpers."""
