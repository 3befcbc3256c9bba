"""Core domain: models, configuration, encoding and send operations."""
