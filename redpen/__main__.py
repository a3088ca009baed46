"""Allow ``python -m redpen``."""

import sys

from redpen.cli import main

sys.exit(main())
