"""DNS-1123 label checks for Kubernetes object names."""

import re

DNS1123_LABEL_MAX_LENGTH = 63
DNS1123_LABEL_FORMAT = "[a-z0-9]([-a-z0-9]*[a-z0-9])?"

_DNS1123_LABEL_RE = re.compile(DNS1123_LABEL_FORMAT)


def dns1123_label_errors(value: object) -> list[str]:
    """Return the reasons a value is not a DNS-1123 label.

    An empty list means the value is valid. Messages follow the wording the
    Kubernetes API server uses when it rejects an object name.

    Args:
        value: Candidate label

    Returns:
        List of human-readable error messages
    """
    if not isinstance(value, str):
        return [f"must be a string, got {type(value).__name__}"]

    errors: list[str] = []
    if len(value) > DNS1123_LABEL_MAX_LENGTH:
        errors.append(f"must be no more than {DNS1123_LABEL_MAX_LENGTH} characters")
    if not _DNS1123_LABEL_RE.fullmatch(value):
        errors.append(
            "a lowercase RFC 1123 label must consist of lower case alphanumeric "
            "characters or '-', and must start and end with an alphanumeric "
            f"character (regex used for validation is '{DNS1123_LABEL_FORMAT}')"
        )
    return errors


def is_dns1123_label(value: object) -> bool:
    """Check whether a value is a valid DNS-1123 label."""
    return not dns1123_label_errors(value)
