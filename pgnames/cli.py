"""Command-line interface for pgnames."""

import argparse
import sys
from typing import Optional

from rich.console import Console

from .cli_builder import build_arg_parser
from .formatters.names import names_json, names_table
from .formatters.output import OutputFormatter
from .naming.deriver import NameDeriver
from .naming.errors import NamingError
from .naming.models import OwnerIdentity
from .naming.types import Category, OwnerKind


class CLI:
    """Command-line interface for pgnames."""

    def __init__(self, console: Optional[Console] = None):
        self.parser = build_arg_parser()
        self._console = console

    def run(self, argv: Optional[list[str]] = None) -> int:
        """Run the CLI.

        Args:
            argv: Command-line arguments (defaults to sys.argv[1:])

        Returns:
            Exit code
        """
        args = self.parser.parse_args(argv)
        output = OutputFormatter(no_color=args.no_color, console=self._console)

        try:
            owner = OwnerIdentity(
                namespace=args.namespace,
                name=args.name,
                kind=OwnerKind.from_string(args.kind),
            )
            names = self._derive_names(args, owner)
        except (NamingError, ValueError) as e:
            output.error("Error", e)
            return 1

        if args.json:
            output.print_json(names_json(owner, names))
        else:
            output.print(names_table(owner, names))

        return 0

    def _derive_names(
        self, args: argparse.Namespace, owner: OwnerIdentity
    ) -> dict:
        deriver = NameDeriver(validate_owner=args.strict)
        if not args.category:
            return deriver.all_names(owner)

        categories = [Category.from_string(value) for value in args.category]
        return {category: deriver.names_for(owner, category) for category in categories}


def main() -> int:
    """Main entry point."""
    cli = CLI()
    return cli.run()


if __name__ == "__main__":
    sys.exit(main())
