"""Allow ``python -m dotdash``."""

import sys

from dotdash.cli import main

sys.exit(main())
