"""Fixed name suffixes for every child resource class.

Each resource class owns one literal suffix that is appended to the owner's
name. Suffixes of classes that share an owner kind and a category must be
pairwise distinct so that no two children of one owner collide; the default
catalog is checked when this module is imported.

Patroni names its objects after its "scope", which is ``<cluster>-ha``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from ..utils.dns import dns1123_label_errors
from ..utils.string_utils import FINGERPRINT_LENGTH, MAX_LABEL_LENGTH
from .errors import CatalogError
from .types import Category, OwnerKind, ResourceClass

SUFFIX_SEPARATOR = "-"


@dataclass(frozen=True)
class NameRule:
    """How the name of one resource class is derived."""

    resource_class: ResourceClass
    """The class this rule names"""

    suffix: str
    """Literal suffix appended to the owner's name, separator included"""

    categories: frozenset[Category]
    """Categories whose name space this class occupies"""

    @property
    def owner_kind(self) -> OwnerKind:
        """Get the kind of owner this rule applies to."""
        return self.resource_class.owner_kind


@dataclass(frozen=True)
class NamingCatalog:
    """Ordered set of name rules, one per resource class."""

    rules: tuple[NameRule, ...]

    def rule_for(self, resource_class: ResourceClass) -> NameRule:
        """Get the rule for a resource class.

        Raises:
            KeyError: If the class has no rule in this catalog
        """
        for rule in self.rules:
            if rule.resource_class is resource_class:
                return rule
        raise KeyError(f"No name rule for '{resource_class.value}'")

    def classes_for(self, owner_kind: OwnerKind, category: Category) -> list[ResourceClass]:
        """List the classes of one category that are derived from one owner kind."""
        return [
            rule.resource_class
            for rule in self.rules
            if rule.owner_kind is owner_kind and category in rule.categories
        ]

    def validate(self) -> None:
        """Check that every rule yields valid names unique within its category.

        Raises:
            CatalogError: Describing every problem found
        """
        problems: list[str] = []
        seen_classes: set[ResourceClass] = set()
        claimed: dict[tuple[OwnerKind, Category], dict[str, ResourceClass]] = {}

        for rule in self.rules:
            name = rule.resource_class.value
            if rule.resource_class in seen_classes:
                problems.append(f"'{name}' has more than one rule")
            seen_classes.add(rule.resource_class)

            problems.extend(f"'{name}': {problem}" for problem in _suffix_problems(rule.suffix))
            if not rule.categories:
                problems.append(f"'{name}' belongs to no category")

            for category in sorted(rule.categories, key=lambda c: c.value):
                suffixes = claimed.setdefault((rule.owner_kind, category), {})
                other = suffixes.get(rule.suffix)
                if other is not None:
                    problems.append(
                        f"'{name}' and '{other.value}' both use suffix '{rule.suffix}' "
                        f"for {category.value} names of a {rule.owner_kind.value}"
                    )
                else:
                    suffixes[rule.suffix] = rule.resource_class

        if problems:
            raise CatalogError("Invalid naming catalog:\n" + "\n".join(f"  - {p}" for p in problems))


def _suffix_problems(suffix: str) -> list[str]:
    if not suffix.startswith(SUFFIX_SEPARATOR):
        return [f"suffix '{suffix}' must start with '{SUFFIX_SEPARATOR}'"]

    problems = [f"suffix '{suffix}' {error}" for error in dns1123_label_errors(suffix[1:])]
    if len(suffix) + 1 + FINGERPRINT_LENGTH > MAX_LABEL_LENGTH:
        problems.append(f"suffix '{suffix}' leaves no room for a truncated owner name")
    return problems


def build_catalog(rules: Iterable[NameRule]) -> NamingCatalog:
    """Create a catalog and validate it."""
    catalog = NamingCatalog(rules=tuple(rules))
    catalog.validate()
    return catalog


def _rule(resource_class: ResourceClass, suffix: str, *categories: Category) -> NameRule:
    return NameRule(resource_class=resource_class, suffix=suffix, categories=frozenset(categories))


DEFAULT_CATALOG = build_catalog(
    [
        _rule(ResourceClass.CLUSTER_CONFIG_MAP, "-config", Category.CONFIG_MAP),
        _rule(ResourceClass.CLUSTER_POD_SERVICE, "-pods", Category.SERVICE),
        _rule(ResourceClass.CLUSTER_PRIMARY_SERVICE, "-primary", Category.SERVICE),
        # Patroni can keep its state in ConfigMaps or in Endpoints, which share
        # their name with a Service.
        _rule(
            ResourceClass.PATRONI_DISTRIBUTED_CONFIGURATION,
            "-ha-config",
            Category.CONFIG_MAP,
            Category.SERVICE,
        ),
        _rule(ResourceClass.PATRONI_LEADER_CONFIG_MAP, "-ha", Category.CONFIG_MAP),
        _rule(ResourceClass.PATRONI_LEADER_ENDPOINTS, "-ha", Category.SERVICE),
        _rule(
            ResourceClass.PATRONI_TRIGGER,
            "-ha-failover",
            Category.CONFIG_MAP,
            Category.SERVICE,
        ),
        _rule(ResourceClass.POSTGRES_USER_SECRET, "-pguser", Category.SECRET),
        _rule(ResourceClass.POSTGRES_TLS_SECRET, "-cluster-cert", Category.SECRET),
        _rule(ResourceClass.PATRONI_AUTH_SECRET, "-patroni-auth", Category.SECRET),
        _rule(ResourceClass.INSTANCE_CONFIG_MAP, "-config", Category.CONFIG_MAP),
        _rule(ResourceClass.INSTANCE_CERTIFICATES, "-certs", Category.SECRET),
    ]
)
