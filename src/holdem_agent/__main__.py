"""Allow ``python -m holdem_agent``."""

import sys

from .cli import main

sys.exit(main())
