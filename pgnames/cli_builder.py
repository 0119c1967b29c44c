"""Factory for constructing the CLI argument parser."""

import argparse

from .naming.types import Category, OwnerKind


def build_arg_parser() -> argparse.ArgumentParser:
    """Construct the argparse parser for the CLI."""
    parser = argparse.ArgumentParser(
        prog="pgnames",
        description="Show the names of objects derived from a Postgres cluster or instance",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument(
        "namespace",
        help="Namespace of the owner",
    )

    parser.add_argument(
        "name",
        help="Name of the owner",
    )

    parser.add_argument(
        "--kind",
        default=OwnerKind.CLUSTER.value,
        choices=[kind.value for kind in OwnerKind],
        help="Kind of the owner (default: cluster)",
    )

    parser.add_argument(
        "--category",
        action="append",
        choices=[category.value for category in Category],
        help="Only show names of this category (repeatable, default: all)",
    )

    parser.add_argument(
        "--json",
        dest="json",
        action="store_true",
        help="Print names as JSON instead of a table",
    )

    parser.add_argument(
        "--strict",
        dest="strict",
        action="store_true",
        help="Fail if the owner's namespace or name is not a valid DNS label",
    )

    parser.add_argument(
        "--no-color",
        dest="no_color",
        action="store_true",
        help="Disable colored output",
    )

    return parser
