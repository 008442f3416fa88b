"""Masking helpers for logging credentials."""
from typing import Optional


def mask_sensitive(value: Optional[str], visible_chars: int = 4) -> str:
    """Mask sensitive values for safe logging."""
    if value is None:
        return "<None>"
    if not isinstance(value, str):
        return "<invalid-type>"
    if len(value) <= visible_chars:
        return "*" * len(value)
    return value[:visible_chars] + "*" * (len(value) - visible_chars)
