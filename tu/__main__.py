"""Module entrypoint for running tu as ``python -m tu``."""

from __future__ import annotations

from tu.cli import main


if __name__ == "__main__":
    main()
