"""``python -m streakcard_app`` entry; a bare run is the CI ``generate`` step."""

from __future__ import annotations

import sys

try:
    # Imported as part of the installed package.
    from .cli import main as _cli_main
except ImportError:
    # Executed as a plain file with the app root on sys.path.
    from streakcard_app.cli import main as _cli_main

DEFAULT_COMMAND = "generate"


def main(argv: list[str] | None = None) -> int:
    args = list(sys.argv[1:] if argv is None else argv)
    return int(_cli_main(args or [DEFAULT_COMMAND]))


if __name__ == "__main__":
    raise SystemExit(main())
