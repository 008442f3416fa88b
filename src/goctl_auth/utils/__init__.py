"""Utility functions for goctl_auth."""

from goctl_auth.utils.masking import mask_sensitive

__all__ = [
    "mask_sensitive",
]
