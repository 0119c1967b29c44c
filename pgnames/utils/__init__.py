"""Shared helpers for building and checking object names."""

from .dns import DNS1123_LABEL_MAX_LENGTH, dns1123_label_errors, is_dns1123_label
from .string_utils import (
    FINGERPRINT_LENGTH,
    MAX_LABEL_LENGTH,
    fingerprint,
    truncate_label,
)

__all__ = [
    "DNS1123_LABEL_MAX_LENGTH",
    "FINGERPRINT_LENGTH",
    "MAX_LABEL_LENGTH",
    "dns1123_label_errors",
    "fingerprint",
    "is_dns1123_label",
    "truncate_label",
]
