import json
import logging
import sys

import click
from eth_utils import decode_hex, encode_hex
from pydantic import ValidationError
from rich.console import Console

from evmlogs.codec import MalformedEncoding, decode_storage_log, encode_storage_log
from evmlogs.core.config import FilterConfig
from evmlogs.filtering import build_query
from evmlogs.jsonlog import log_from_json, log_to_json, logs_from_json, logs_to_json

console = Console(stderr=True)


def _read_json(path: str):
    try:
        if path == "-":
            return json.load(sys.stdin)
        with open(path) as f:
            return json.load(f)
    except json.JSONDecodeError as e:
        raise click.ClickException(f"invalid JSON in {path}: {e}") from e
    except OSError as e:
        raise click.ClickException(f"cannot read {path}: {e}") from e


@click.group()
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging")
def cli(verbose: bool) -> None:
    """evmlogs: encode, decode and filter EVM contract logs."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            force=True,
        )


@cli.command("encode")
@click.option("--input", "input_path", default="-", show_default=True, help="JSON log object (file path or '-')")
def encode_cmd(input_path: str) -> None:
    """Storage-encode one JSON log and print it as 0x-hex."""
    try:
        log = log_from_json(_read_json(input_path))
    except (ValidationError, ValueError) as e:
        raise click.ClickException(f"bad log: {e}") from e
    click.echo(encode_hex(encode_storage_log(log)))


@cli.command("decode")
@click.argument("blob")
def decode_cmd(blob: str) -> None:
    """Decode a 0x-hex storage blob (current or legacy layout) to JSON."""
    try:
        log = decode_storage_log(decode_hex(blob))
    except MalformedEncoding as e:
        raise click.ClickException(f"malformed encoding: {e}") from e
    except ValueError as e:
        raise click.ClickException(f"bad hex: {e}") from e
    click.echo(json.dumps(log_to_json(log), indent=2))


@cli.command("filter")
@click.option("--input", "input_path", required=True, help="JSON array of logs (file path or '-')")
@click.option("--address", "addresses", multiple=True, help="Emitter address; repeat to OR")
@click.option(
    "--topics",
    "topics_json",
    default="[]",
    show_default=True,
    help='eth_getLogs topics, e.g. \'[["0x..", "0x.."], null, "Transfer(address,address,uint256)"]\'',
)
@click.option(
    "--match",
    "mode",
    type=click.Choice(["positional", "any", "legacy"]),
    default="positional",
    show_default=True,
)
@click.option("--max-logs", type=int, default=0, show_default=True, help="Stop after examining N logs (0 = no cap)")
@click.option("--output", "output_path", default="", help="Write matches here instead of stdout")
def filter_cmd(
    input_path: str,
    addresses: tuple[str, ...],
    topics_json: str,
    mode: str,
    max_logs: int,
    output_path: str,
) -> None:
    """Filter a JSON array of logs by address and topics."""
    try:
        topics = json.loads(topics_json)
    except json.JSONDecodeError as e:
        raise click.UsageError(f"--topics is not valid JSON: {e}") from e
    if not isinstance(topics, list):
        raise click.UsageError("--topics must be a JSON array")

    config = FilterConfig(
        addresses=list(addresses),
        topics=topics,
        mode=mode,  # type: ignore[arg-type]
        max_logs=max_logs,
    )
    raw_logs = _read_json(input_path)
    if not isinstance(raw_logs, list):
        raise click.UsageError(f"--input must hold a JSON array of logs, got {type(raw_logs).__name__}")
    try:
        query = build_query(config)
        logs = logs_from_json(raw_logs)
    except (ValidationError, ValueError) as e:
        raise click.ClickException(str(e)) from e

    matches = query.run(logs)
    payload = json.dumps(logs_to_json(matches), indent=2)
    if output_path:
        try:
            with open(output_path, "w") as f:
                f.write(payload + "\n")
        except OSError as e:
            raise click.ClickException(f"cannot write {output_path}: {e}") from e
    else:
        click.echo(payload)

    console.print(f"[bold]done[/]: [green]matched[/]={len(matches)}  scanned_input={len(logs)}  mode={mode}")
