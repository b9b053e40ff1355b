"""``python -m tierchess`` entry point."""

import sys

from tierchess.app import main

sys.exit(main())
