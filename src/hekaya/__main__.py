"""Main entry point for the hekaya CLI when run as a module."""

from hekaya.cli.main import main

if __name__ == "__main__":  # pragma: no cover
    main()
