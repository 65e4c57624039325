"""Allows running the generator with ``python -m fancyzonegen``."""

from fancyzonegen.main import main

if __name__ == "__main__":
    raise SystemExit(main())
