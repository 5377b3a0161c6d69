"""Allow ``python -m localeasy``."""

from __future__ import annotations

import sys

from localeasy.cli import main

if __name__ == "__main__":
    sys.exit(main())
