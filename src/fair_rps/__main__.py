"""Allow ``python -m fair_rps``."""

from .cli import main

raise SystemExit(main())
