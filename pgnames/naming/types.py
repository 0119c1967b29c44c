"""Type definitions for owners, object categories and resource classes."""

from enum import Enum


class OwnerKind(Enum):
    """Kinds of objects that own derived child objects."""

    CLUSTER = "cluster"
    INSTANCE = "instance"

    @classmethod
    def from_string(cls, kind_str: str) -> "OwnerKind":
        """Parse owner kind from string.

        Args:
            kind_str: Kind string (case-insensitive)

        Returns:
            OwnerKind enum value

        Raises:
            ValueError: If kind string is not valid
        """
        normalized = kind_str.lower().strip()
        try:
            return cls(normalized)
        except ValueError:
            valid_kinds = ", ".join(k.value for k in cls)
            raise ValueError(
                f"Invalid owner kind '{kind_str}'. Valid kinds: {valid_kinds}"
            )


class Category(Enum):
    """Kinds of child object that share one name space per namespace."""

    CONFIG_MAP = "config-map"
    SECRET = "secret"
    SERVICE = "service"

    @classmethod
    def from_string(cls, category_str: str) -> "Category":
        """Parse category from string, accepting '_' in place of '-'."""
        normalized = category_str.lower().strip().replace("_", "-")
        try:
            return cls(normalized)
        except ValueError:
            valid_categories = ", ".join(c.value for c in cls)
            raise ValueError(
                f"Invalid category '{category_str}'. Valid categories: {valid_categories}"
            )


class ResourceClass(Enum):
    """Child objects whose names are derived from an owner."""

    CLUSTER_CONFIG_MAP = "cluster-config-map"
    CLUSTER_POD_SERVICE = "cluster-pod-service"
    CLUSTER_PRIMARY_SERVICE = "cluster-primary-service"
    PATRONI_DISTRIBUTED_CONFIGURATION = "patroni-distributed-configuration"
    PATRONI_LEADER_CONFIG_MAP = "patroni-leader-config-map"
    PATRONI_LEADER_ENDPOINTS = "patroni-leader-endpoints"
    PATRONI_TRIGGER = "patroni-trigger"
    POSTGRES_USER_SECRET = "postgres-user-secret"
    POSTGRES_TLS_SECRET = "postgres-tls-secret"
    PATRONI_AUTH_SECRET = "patroni-auth-secret"

    INSTANCE_CONFIG_MAP = "instance-config-map"
    INSTANCE_CERTIFICATES = "instance-certificates"

    @property
    def owner_kind(self) -> OwnerKind:
        """Get the kind of owner this class is derived from."""
        if self in _INSTANCE_CLASSES:
            return OwnerKind.INSTANCE
        return OwnerKind.CLUSTER


_INSTANCE_CLASSES = frozenset(
    {
        ResourceClass.INSTANCE_CONFIG_MAP,
        ResourceClass.INSTANCE_CERTIFICATES,
    }
)
