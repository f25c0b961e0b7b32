"""Allow ``python -m idxgraph``."""

import sys

from .cli import main

sys.exit(main())
