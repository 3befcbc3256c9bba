"""Adapters connecting the core to HTTP clients and stdlib logging."""
