#!/usr/bin/env python3
"""Generate the moveit man page from the Typer/Click app definition.

Usage:
    python scripts/generate_man.py [--output-dir DIR]

The generated file is written to man/man1/moveit.1 by default.
"""

import argparse
import sys
from pathlib import Path

# Allow running from repo root or scripts/ directory
repo_root = Path(__file__).parent.parent
sys.path.insert(0, str(repo_root / "src"))

import typer  # noqa: E402
from click_man.core import write_man_pages  # noqa: E402

from moveit_cli import __version__  # noqa: E402
from moveit_cli.main import app  # noqa: E402


def main() -> None:
    parser = argparse.ArgumentParser(description="Generate moveit man page.")
    parser.add_argument(
        "--output-dir",
        default=str(repo_root / "man" / "man1"),
        help="Directory to write generated man page(s) into (default: man/man1/)",
    )
    args = parser.parse_args()

    output_dir = Path(args.output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)

    command = typer.main.get_command(app)
    write_man_pages(
        name="moveit",
        cli=command,
        version=__version__,
        target_dir=str(output_dir),
    )

    generated = output_dir / "moveit.1"
    if generated.exists():
        print(f"Man page written to: {generated}")
    else:
        print("Warning: expected output file not found.", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
