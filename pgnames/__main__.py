"""Entry point for ``python -m pgnames``."""

import sys

from .cli import main

sys.exit(main())
