"""Tests for the catalog of name rules."""

import pytest

from pgnames.naming.catalog import DEFAULT_CATALOG, NameRule, NamingCatalog, build_catalog
from pgnames.naming.errors import CatalogError
from pgnames.naming.types import Category, OwnerKind, ResourceClass


def rule(resource_class: ResourceClass, suffix: str, *categories: Category) -> NameRule:
    return NameRule(resource_class, suffix, frozenset(categories))


class TestDefaultCatalog:
    """Tests for the built-in name rules."""

    def test_every_class_has_a_rule(self) -> None:
        for resource_class in ResourceClass:
            assert DEFAULT_CATALOG.rule_for(resource_class).resource_class is resource_class

    def test_validates(self) -> None:
        DEFAULT_CATALOG.validate()

    def test_patroni_classes_in_two_categories(self) -> None:
        for resource_class in (
            ResourceClass.PATRONI_DISTRIBUTED_CONFIGURATION,
            ResourceClass.PATRONI_TRIGGER,
        ):
            assert DEFAULT_CATALOG.rule_for(resource_class).categories == {
                Category.CONFIG_MAP,
                Category.SERVICE,
            }

    def test_classes_for(self) -> None:
        assert DEFAULT_CATALOG.classes_for(OwnerKind.CLUSTER, Category.SECRET) == [
            ResourceClass.POSTGRES_USER_SECRET,
            ResourceClass.POSTGRES_TLS_SECRET,
            ResourceClass.PATRONI_AUTH_SECRET,
        ]
        assert DEFAULT_CATALOG.classes_for(OwnerKind.INSTANCE, Category.CONFIG_MAP) == [
            ResourceClass.INSTANCE_CONFIG_MAP,
        ]
        assert DEFAULT_CATALOG.classes_for(OwnerKind.INSTANCE, Category.SERVICE) == []

    def test_same_suffix_allowed_across_categories(self) -> None:
        leader_config_map = DEFAULT_CATALOG.rule_for(ResourceClass.PATRONI_LEADER_CONFIG_MAP)
        leader_endpoints = DEFAULT_CATALOG.rule_for(ResourceClass.PATRONI_LEADER_ENDPOINTS)

        assert leader_config_map.suffix == leader_endpoints.suffix
        assert not leader_config_map.categories & leader_endpoints.categories

    def test_same_suffix_allowed_across_owner_kinds(self) -> None:
        assert (
            DEFAULT_CATALOG.rule_for(ResourceClass.CLUSTER_CONFIG_MAP).suffix
            == DEFAULT_CATALOG.rule_for(ResourceClass.INSTANCE_CONFIG_MAP).suffix
        )


class TestValidate:
    """Tests for rejecting catalogs that could produce colliding or invalid names."""

    def test_duplicate_suffix_in_category(self) -> None:
        with pytest.raises(CatalogError, match="both use suffix '-ha'"):
            build_catalog(
                [
                    rule(ResourceClass.PATRONI_LEADER_CONFIG_MAP, "-ha", Category.CONFIG_MAP),
                    rule(ResourceClass.PATRONI_TRIGGER, "-ha", Category.CONFIG_MAP, Category.SERVICE),
                ]
            )

    def test_duplicate_rule_for_class(self) -> None:
        with pytest.raises(CatalogError, match="more than one rule"):
            build_catalog(
                [
                    rule(ResourceClass.CLUSTER_POD_SERVICE, "-pods", Category.SERVICE),
                    rule(ResourceClass.CLUSTER_POD_SERVICE, "-pods2", Category.SERVICE),
                ]
            )

    @pytest.mark.parametrize("suffix", ["pods", "-", "-Pods", "--pods", "-pods-", "-" + "p" * 60])
    def test_bad_suffix(self, suffix: str) -> None:
        with pytest.raises(CatalogError, match="suffix"):
            build_catalog([rule(ResourceClass.CLUSTER_POD_SERVICE, suffix, Category.SERVICE)])

    def test_rule_without_category(self) -> None:
        with pytest.raises(CatalogError, match="no category"):
            build_catalog([rule(ResourceClass.CLUSTER_POD_SERVICE, "-pods")])

    def test_reports_every_problem(self) -> None:
        catalog = NamingCatalog(
            rules=(
                rule(ResourceClass.POSTGRES_USER_SECRET, "pguser", Category.SECRET),
                rule(ResourceClass.POSTGRES_TLS_SECRET, "-tls", Category.SECRET),
                rule(ResourceClass.PATRONI_AUTH_SECRET, "-tls", Category.SECRET),
            )
        )

        with pytest.raises(CatalogError) as exc_info:
            catalog.validate()

        message = str(exc_info.value)
        assert "postgres-user-secret" in message
        assert "'patroni-auth-secret' and 'postgres-tls-secret'" in message

    def test_unknown_class(self) -> None:
        catalog = build_catalog([rule(ResourceClass.CLUSTER_POD_SERVICE, "-pods", Category.SERVICE)])

        with pytest.raises(KeyError):
            catalog.rule_for(ResourceClass.CLUSTER_PRIMARY_SERVICE)
