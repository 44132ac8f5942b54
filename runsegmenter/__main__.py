"""Allow running as ``python -m runsegmenter``."""

import sys

from .cli import main

sys.exit(main())
