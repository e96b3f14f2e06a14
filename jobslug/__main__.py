"""Module entrypoint for running jobslug as ``python -m jobslug``."""

from __future__ import annotations

from jobslug.cli import main


if __name__ == "__main__":
    main()
