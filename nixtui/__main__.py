"""Module entrypoint for ``python -m nixtui``.

All argument parsing and runtime setup happen in ``nixtui.cli``.
"""

import sys

from .cli import main


if __name__ == "__main__":
    sys.exit(main())
