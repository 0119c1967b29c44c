"""Errors raised while deriving child object names."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .models import OwnerIdentity
    from .types import ResourceClass


class NamingError(Exception):
    """Base class for naming errors."""


class InvalidOwnerIdentity(NamingError):
    """Raised when an owner's namespace or name is not a DNS-1123 label."""

    def __init__(self, owner: OwnerIdentity, errors: list[str]):
        self.owner = owner
        self.errors = errors
        details = "\n".join(f"  - {error}" for error in errors)
        super().__init__(f"Invalid owner {owner}:\n{details}")


class OwnerKindMismatch(NamingError):
    """Raised when a name is requested for an owner of the wrong kind."""

    def __init__(self, owner: OwnerIdentity, resource_class: ResourceClass):
        self.owner = owner
        self.resource_class = resource_class
        super().__init__(
            f"'{resource_class.value}' is derived from a {resource_class.owner_kind.value}, "
            f"got {owner.kind.value} {owner}"
        )


class CatalogError(NamingError):
    """Raised when a naming catalog cannot guarantee unique, valid names."""
