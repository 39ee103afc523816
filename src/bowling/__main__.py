"""``python -m bowling``: forward the process arguments to the CLI."""

from __future__ import annotations

import sys

from bowling.cli.main import main as cli_main


def main(argv: list[str] | None = None) -> None:
    cli_main(sys.argv[1:] if argv is None else argv)


if __name__ == "__main__":  # pragma: no cover
    main()
