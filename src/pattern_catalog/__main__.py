"""Allow ``python -m pattern_catalog``."""

from pattern_catalog.cli import main


if __name__ == "__main__":
    raise SystemExit(main())
