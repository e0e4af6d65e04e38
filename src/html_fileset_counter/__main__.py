"""Module entry point for `python -m html_fileset_counter`."""

from .cli import main

if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
