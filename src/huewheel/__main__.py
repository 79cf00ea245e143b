"""Allow ``python -m huewheel``."""
import sys

from huewheel.cli import main

sys.exit(main())
