# SPDX-FileCopyrightText: 2025 polysecret contributors
# SPDX-License-Identifier: MIT

"""Command line interface for polysecret."""

from __future__ import annotations

import click

from .decoder import decode
from .errors import SecretRecoveryError
from .log import configure, get_logger
from .settings import settings
from .solver import SecretSolver

_logger = get_logger(__name__)

_LEVELS = click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False)


@click.group()
@click.option("--log-level", type=_LEVELS, default=None, help="Override POLYSECRET_LOG_LEVEL.")
def main(log_level: str | None) -> None:
    """Recover polynomial secrets from base-encoded points."""
    configure((log_level or settings.log_level).upper())


@main.command()
@click.argument("files", nargs=-1, required=True, type=click.Path(dir_okay=False))
@click.option(
    "--verify/--no-verify",
    default=None,
    help="Cross-check surplus points against the polynomial (default: POLYSECRET_VERIFY).",
)
def solve(files: tuple[str, ...], verify: bool | None) -> None:
    """Recover the constant term of each dataset FILE."""
    for path in files:
        try:
            report = SecretSolver.from_file(path, verify=verify).solve()
        except SecretRecoveryError as exc:
            _logger.error("Failed to solve %s: %s", path, exc)
            raise click.ClickException(f"{path}: {exc}") from exc
        if len(files) == 1:
            click.echo(report.secret)
        else:
            click.echo(f"{path}: {report.secret}")


@main.command("decode")
@click.argument("value")
@click.option("--base", "-b", required=True, help="Base of VALUE, 2 to 36.")
def decode_command(value: str, base: str) -> None:
    """Print VALUE, written in BASE, as a decimal integer."""
    try:
        click.echo(decode(value, base))
    except SecretRecoveryError as exc:
        raise click.ClickException(str(exc)) from exc


if __name__ == "__main__":
    main()
