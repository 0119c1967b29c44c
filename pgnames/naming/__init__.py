"""Naming module for objects derived from Postgres clusters and instances."""

from .types import Category, OwnerKind, ResourceClass
from .models import DerivedIdentity, ObjectKey, OwnerIdentity
from .errors import CatalogError, InvalidOwnerIdentity, NamingError, OwnerKindMismatch
from .keys import as_object_key
from .catalog import DEFAULT_CATALOG, NameRule, NamingCatalog, build_catalog
from .deriver import (
    NameDeriver,
    check_owner,
    cluster_config_map,
    cluster_pod_service,
    cluster_primary_service,
    derive,
    instance_certificates,
    instance_config_map,
    patroni_auth_secret,
    patroni_distributed_configuration,
    patroni_leader_config_map,
    patroni_leader_endpoints,
    patroni_trigger,
    postgres_tls_secret,
    postgres_user_secret,
)

__all__ = [
    "Category",
    "OwnerKind",
    "ResourceClass",
    "DerivedIdentity",
    "ObjectKey",
    "OwnerIdentity",
    "CatalogError",
    "InvalidOwnerIdentity",
    "NamingError",
    "OwnerKindMismatch",
    "as_object_key",
    "DEFAULT_CATALOG",
    "NameRule",
    "NamingCatalog",
    "build_catalog",
    "NameDeriver",
    "check_owner",
    "derive",
    "cluster_config_map",
    "cluster_pod_service",
    "cluster_primary_service",
    "instance_certificates",
    "instance_config_map",
    "patroni_auth_secret",
    "patroni_distributed_configuration",
    "patroni_leader_config_map",
    "patroni_leader_endpoints",
    "patroni_trigger",
    "postgres_tls_secret",
    "postgres_user_secret",
]
