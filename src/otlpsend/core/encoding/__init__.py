"""Encoders for the OTLP wire format."""
