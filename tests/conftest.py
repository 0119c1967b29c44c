"""Pytest configuration and shared fixtures."""

import pytest

from pgnames.naming.models import OwnerIdentity


@pytest.fixture
def cluster() -> OwnerIdentity:
    """Return a cluster owner with a short name."""
    return OwnerIdentity.cluster("ns1", "pg0")


@pytest.fixture
def instance() -> OwnerIdentity:
    """Return an instance owner with a short name."""
    return OwnerIdentity.instance("ns", "some-such")
