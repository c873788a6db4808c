"""Main Typer application — registers all CLI commands.

Entry point: ``artifactcheck`` (configured via pyproject.toml scripts).
"""

from __future__ import annotations

import typer

from artifactcheck.cli.commands.check import check_cmd
from artifactcheck.cli.commands.inspect import fingerprint_cmd, hashes_cmd

app = typer.Typer(
    name="artifactcheck",
    help="artifactcheck: fingerprint build artifacts and check the blob cache.",
    no_args_is_help=True,
    rich_markup_mode="rich",
    add_completion=False,
)

app.command(name="check", help="Fingerprint all artifacts and check the store.")(check_cmd)
app.command(name="fingerprint", help="Print the fingerprint for one artifact.")(fingerprint_cmd)
app.command(name="hashes", help="List the loaded hash table.")(hashes_cmd)


def main() -> None:
    """CLI entry point."""
    app()


if __name__ == "__main__":
    main()
