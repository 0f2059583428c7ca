"""Module entrypoint for ``python -m linproj``."""

from linproj.cli import main

if __name__ == "__main__":
    raise SystemExit(main())
