"""Package entry point for ``python -m binutil``.

WHY: Python's ``-m`` flag looks for ``__main__.py`` inside the package
and executes it; this delegates to the CLI.
"""

import sys

from binutil.cli import main

if __name__ == "__main__":
    sys.exit(main())
