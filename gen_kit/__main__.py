"""Allow running gen-kit with python -m gen_kit."""

import sys

from .cli import main

sys.exit(main())
