"""Script entry point.

Allows running the CLI with `python -m main` from inside `src/`, alongside the
`randpass` console script.
"""

from __future__ import annotations

from cli.main import run


def main() -> None:
    run()


if __name__ == "__main__":
    main()
