"""Main entry point for the hekaya CLI when run as ``python -m hekaya.cli``."""

from hekaya.cli.main import main

if __name__ == "__main__":  # pragma: no cover
    main()
