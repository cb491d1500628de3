"""Allow ``python -m tagdown``."""

import sys

from tagdown.cli import main

if __name__ == "__main__":
    sys.exit(main())
