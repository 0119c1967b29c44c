"""Formatting of derived names as Rich tables and JSON documents."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

from rich.table import Table
from rich.text import Text

if TYPE_CHECKING:
    from ..naming.models import DerivedIdentity, OwnerIdentity
    from ..naming.types import Category, ResourceClass

NamesByCategory = dict["Category", dict["ResourceClass", "DerivedIdentity"]]


def names_table(owner: OwnerIdentity, names: NamesByCategory) -> Table:
    """Build a table with one row per derived name.

    Classes that occupy more than one category appear once per category.
    """
    table = Table(title=f"{owner.kind.value} {owner}", title_justify="left")
    table.add_column("Category", style="cyan", no_wrap=True)
    table.add_column("Resource class", no_wrap=True)
    table.add_column("Namespace", style="dim")
    table.add_column("Name", style="bold green")

    for category, children in names.items():
        for resource_class, identity in children.items():
            table.add_row(
                category.value,
                resource_class.value,
                identity.namespace,
                Text(identity.name),
            )

    return table


def names_json(owner: OwnerIdentity, names: NamesByCategory) -> str:
    """Serialize derived names as a JSON document."""
    document = {
        "owner": {
            "kind": owner.kind.value,
            "namespace": owner.namespace,
            "name": owner.name,
        },
        "names": {
            category.value: {
                resource_class.value: {
                    "namespace": identity.namespace,
                    "name": identity.name,
                }
                for resource_class, identity in children.items()
            }
            for category, children in names.items()
            if children
        },
    }
    return json.dumps(document, indent=2)
