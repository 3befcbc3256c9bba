"""Trace and span id generators.

Ids are plain random hex strings. They are not audited for cryptographic
use and carry no uniqueness guarantee beyond the collision odds of the
random source.
"""

import secrets


def new_trace_id() -> str:
    """Return a random 128-bit trace id as 32 lowercase hex characters."""
    return secrets.token_hex(16)


def new_span_id() -> str:
    """Return a random 64-bit span id as 16 lowercase hex characters."""
    return secrets.token_hex(8)
