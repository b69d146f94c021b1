"""Module entry point for running with python -m docindex."""

from docindex.cli import main

if __name__ == "__main__":
    raise SystemExit(main())
