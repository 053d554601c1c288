# SPDX-FileCopyrightText: 2025 shamir-recover contributors
# SPDX-License-Identifier: MIT

"""Command line interface: recover secrets from share files."""

from __future__ import annotations

import logging
from pathlib import Path

import click
from tabulate import tabulate

from . import config
from .decoder import decode
from .errors import DecodeError, RecoveryError
from .loader import load_request
from .models import RecoveryRequest
from .recovery import RecoveryResult, find_inconsistent_shares, recover_detailed


def _format_decoded(value: int) -> str:
    try:
        return str(value)
    except ValueError:
        # beyond the interpreter's int-to-str digit limit
        return f"<{value.bit_length()}-bit value>"


def _share_table(request: RecoveryRequest, result: RecoveryResult) -> str:
    used = set(result.indices)
    skipped = set(result.skipped)
    rows = []
    for index in request.sorted_indices():
        share = request.shares[index]
        try:
            decoded = _format_decoded(decode(share.value, share.base))
        except DecodeError as exc:
            decoded = f"<{exc}>"
        if index in used:
            status = "used"
        elif index in skipped:
            status = "skipped"
        else:
            status = "-"
        rows.append([index, share.base, share.value, decoded, status])
    # decoded values must stay exact decimal strings
    return tabulate(
        rows,
        headers=["index", "base", "value", "decoded", "status"],
        disable_numparse=True,
    )


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.argument(
    "files",
    nargs=-1,
    required=True,
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
)
@click.option(
    "--lenient/--fail-fast",
    default=None,
    help="Skip shares that fail to decode instead of aborting. [env: SHAMIR_RECOVER_LENIENT]",
)
@click.option("--prime", type=int, default=None, help="Field modulus. [env: SHAMIR_RECOVER_PRIME]")
@click.option("--verify", is_flag=True, help="Check unused shares against the recovered polynomial.")
@click.option("--show-shares", is_flag=True, help="Print a table of the decoded shares.")
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging.")
def main(
    files: tuple[Path, ...],
    lenient: bool | None,
    prime: int | None,
    verify: bool,
    show_shares: bool,
    verbose: bool,
) -> None:
    """Recover the Shamir secret from each request FILE (JSON or YAML)."""

    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    defaults = config.policy
    try:
        policy = config.RecoveryPolicy(
            prime=defaults.prime if prime is None else prime,
            lenient=defaults.lenient if lenient is None else lenient,
        )
    except ValueError as exc:
        raise click.BadParameter(str(exc), param_hint="--prime") from exc

    for path in files:
        prefix = f"{path}: " if len(files) > 1 else ""
        try:
            request = load_request(path)
            result = recover_detailed(request, policy)
            bad = find_inconsistent_shares(request, policy, result=result) if verify else []
        except (RecoveryError, ValueError) as exc:
            raise click.ClickException(f"{path}: {exc}") from exc

        if show_shares:
            click.echo(_share_table(request, result))
        try:
            secret = str(result.secret)
        except ValueError as exc:
            raise click.ClickException(f"{path}: {exc}") from exc
        click.echo(f"{prefix}{secret}")
        if verify:
            if bad:
                click.echo(f"{prefix}inconsistent shares: {', '.join(map(str, bad))}")
            else:
                click.echo(f"{prefix}all shares consistent")


if __name__ == "__main__":
    main()
