"""Derivation of child object names from an owning cluster or instance.

Every name is the owner's name followed by a fixed suffix per resource class,
shortened with a content fingerprint when it would not fit in a DNS label.
Children always live in the owner's namespace.

Names are a pure function of the owner's namespace, name and kind. Nothing is
cached or stored, so the same names come back on every reconcile.
"""

from __future__ import annotations

from ..utils.dns import dns1123_label_errors
from ..utils.string_utils import truncate_label
from .catalog import DEFAULT_CATALOG, NamingCatalog
from .errors import InvalidOwnerIdentity, OwnerKindMismatch
from .models import DerivedIdentity, OwnerIdentity
from .types import Category, ResourceClass


class NameDeriver:
    """Computes the identities of child objects for an owner."""

    def __init__(self, catalog: NamingCatalog = DEFAULT_CATALOG, validate_owner: bool = False):
        """Initialize the deriver.

        Args:
            catalog: Name rules to derive with
            validate_owner: If True, reject owners whose namespace or name is
                not a DNS-1123 label instead of deriving invalid child names
        """
        self._catalog = catalog
        self._validate_owner = validate_owner

    @property
    def catalog(self) -> NamingCatalog:
        """Get the catalog of name rules."""
        return self._catalog

    def derive(self, owner: OwnerIdentity, resource_class: ResourceClass) -> DerivedIdentity:
        """Derive the identity of one child object.

        Args:
            owner: Identity of the owning cluster or instance
            resource_class: The child to name

        Returns:
            Namespace and name of the child

        Raises:
            OwnerKindMismatch: If the class is not derived from owners of this kind
            InvalidOwnerIdentity: If the owner has no name, or if owner
                validation is on and the owner is invalid
        """
        if owner.kind is not resource_class.owner_kind:
            raise OwnerKindMismatch(owner, resource_class)
        if self._validate_owner or not _is_text(owner.namespace, owner.name):
            check_owner(owner)

        rule = self._catalog.rule_for(resource_class)
        return DerivedIdentity(
            namespace=owner.namespace,
            name=truncate_label(owner.name, rule.suffix),
        )

    def names_for(
        self, owner: OwnerIdentity, category: Category
    ) -> dict[ResourceClass, DerivedIdentity]:
        """Derive every child of one category for an owner, in catalog order."""
        return {
            resource_class: self.derive(owner, resource_class)
            for resource_class in self._catalog.classes_for(owner.kind, category)
        }

    def all_names(
        self, owner: OwnerIdentity
    ) -> dict[Category, dict[ResourceClass, DerivedIdentity]]:
        """Derive every child of every category for an owner."""
        return {category: self.names_for(owner, category) for category in Category}


def check_owner(owner: OwnerIdentity) -> None:
    """Check that an owner's namespace and name are DNS-1123 labels.

    Raises:
        InvalidOwnerIdentity: Listing every problem found
    """
    errors = [f"namespace: {error}" for error in dns1123_label_errors(owner.namespace)]
    errors.extend(f"name: {error}" for error in dns1123_label_errors(owner.name))
    if errors:
        raise InvalidOwnerIdentity(owner, errors)


def _is_text(*values: object) -> bool:
    return all(isinstance(value, str) for value in values)


_default_deriver = NameDeriver()
_validating_deriver = NameDeriver(validate_owner=True)


def derive(
    owner: OwnerIdentity, resource_class: ResourceClass, *, validate_owner: bool = False
) -> DerivedIdentity:
    """Derive a child identity using the default catalog."""
    deriver = _validating_deriver if validate_owner else _default_deriver
    return deriver.derive(owner, resource_class)


def cluster_config_map(cluster: OwnerIdentity) -> DerivedIdentity:
    """Return the ConfigMap that holds settings shared by every instance."""
    return _default_deriver.derive(cluster, ResourceClass.CLUSTER_CONFIG_MAP)


def cluster_pod_service(cluster: OwnerIdentity) -> DerivedIdentity:
    """Return the headless Service that gives every pod a DNS record."""
    return _default_deriver.derive(cluster, ResourceClass.CLUSTER_POD_SERVICE)


def cluster_primary_service(cluster: OwnerIdentity) -> DerivedIdentity:
    """Return the Service that routes to the current primary."""
    return _default_deriver.derive(cluster, ResourceClass.CLUSTER_PRIMARY_SERVICE)


def patroni_distributed_configuration(cluster: OwnerIdentity) -> DerivedIdentity:
    """Return the ConfigMap or Endpoints that Patroni keeps its dynamic configuration in."""
    return _default_deriver.derive(cluster, ResourceClass.PATRONI_DISTRIBUTED_CONFIGURATION)


def patroni_leader_config_map(cluster: OwnerIdentity) -> DerivedIdentity:
    """Return the ConfigMap Patroni uses for leader election."""
    return _default_deriver.derive(cluster, ResourceClass.PATRONI_LEADER_CONFIG_MAP)


def patroni_leader_endpoints(cluster: OwnerIdentity) -> DerivedIdentity:
    """Return the Endpoints Patroni uses for leader election."""
    return _default_deriver.derive(cluster, ResourceClass.PATRONI_LEADER_ENDPOINTS)


def patroni_trigger(cluster: OwnerIdentity) -> DerivedIdentity:
    """Return the ConfigMap or Endpoints that requests a Patroni failover."""
    return _default_deriver.derive(cluster, ResourceClass.PATRONI_TRIGGER)


def postgres_user_secret(cluster: OwnerIdentity) -> DerivedIdentity:
    return _default_deriver.derive(cluster, ResourceClass.POSTGRES_USER_SECRET)


def postgres_tls_secret(cluster: OwnerIdentity) -> DerivedIdentity:
    return _default_deriver.derive(cluster, ResourceClass.POSTGRES_TLS_SECRET)


def patroni_auth_secret(cluster: OwnerIdentity) -> DerivedIdentity:
    return _default_deriver.derive(cluster, ResourceClass.PATRONI_AUTH_SECRET)


def instance_config_map(instance: OwnerIdentity) -> DerivedIdentity:
    """Return the ConfigMap with settings for a single instance."""
    return _default_deriver.derive(instance, ResourceClass.INSTANCE_CONFIG_MAP)


def instance_certificates(instance: OwnerIdentity) -> DerivedIdentity:
    """Return the Secret with the certificates of a single instance."""
    return _default_deriver.derive(instance, ResourceClass.INSTANCE_CERTIFICATES)
