"""Identity models for owners and their child objects."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from .types import OwnerKind


@dataclass(frozen=True)
class ObjectKey:
    """Namespace and name of any object, used for lookups."""

    namespace: str
    name: str

    def __str__(self) -> str:
        return f"{self.namespace}/{self.name}"


@dataclass(frozen=True)
class OwnerIdentity:
    """Identity of the object that owns derived children."""

    namespace: str
    name: str
    kind: OwnerKind

    def __str__(self) -> str:
        return f"{self.namespace}/{self.name}"

    @property
    def key(self) -> ObjectKey:
        """Get the lookup key of the owner itself."""
        return ObjectKey(namespace=self.namespace, name=self.name)

    @classmethod
    def cluster(cls, namespace: str, name: str) -> "OwnerIdentity":
        """Create the identity of a Postgres cluster."""
        return cls(namespace=namespace, name=name, kind=OwnerKind.CLUSTER)

    @classmethod
    def instance(cls, namespace: str, name: str) -> "OwnerIdentity":
        """Create the identity of a single Postgres instance."""
        return cls(namespace=namespace, name=name, kind=OwnerKind.INSTANCE)

    @classmethod
    def from_object(cls, obj: Any, kind: OwnerKind) -> "OwnerIdentity":
        """Create an owner identity from a live object or its metadata.

        Args:
            obj: Anything accepted by as_object_key
            kind: Kind of the owner

        Returns:
            OwnerIdentity instance

        Raises:
            InvalidOwnerIdentity: If the object has not been named yet
        """
        from .errors import InvalidOwnerIdentity
        from .keys import as_object_key

        key = as_object_key(obj)
        owner = cls(namespace=key.namespace, name=key.name, kind=kind)
        if not isinstance(key.name, str) or not key.name:
            raise InvalidOwnerIdentity(owner, ["name: object has not been named yet"])
        return owner


@dataclass(frozen=True)
class DerivedIdentity:
    """Namespace and name of a child object derived from an owner."""

    namespace: str
    name: str

    def __str__(self) -> str:
        return f"{self.namespace}/{self.name}"

    @property
    def key(self) -> ObjectKey:
        """Get the lookup key of this child."""
        return ObjectKey(namespace=self.namespace, name=self.name)
