"""Allow ``python -m searchpaths``."""

import sys

from searchpaths.cli._dispatcher import main

if __name__ == "__main__":
    sys.exit(main())
