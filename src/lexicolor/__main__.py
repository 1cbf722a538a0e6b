"""Allow ``python -m lexicolor``."""

import sys

from lexicolor.cli import main

sys.exit(main())
