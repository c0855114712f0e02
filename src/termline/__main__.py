"""Allow running as ``python -m termline``."""

import sys

from termline.cli import main

sys.exit(main())
