"""Allow running the CLI with ``python -m selector_request``."""

from selector_request.cli import main

raise SystemExit(main())
