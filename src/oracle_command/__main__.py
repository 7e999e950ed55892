"""Allow ``python -m oracle_command``."""

import sys

from .cli import main

sys.exit(main())
