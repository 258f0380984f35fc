"""Allow ``python -m gridchess``."""

import sys

from gridchess.cli import main

sys.exit(main())
