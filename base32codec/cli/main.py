# base32codec/cli/main.py
"""
CLI for encoding and decoding data with the RFC4648 and Crockford base32 alphabets.
"""

import os
import logging
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table

from base32codec.core.alphabet import SUPPORTED_VARIANTS, resolve_alphabet
from base32codec.core.canon import alphabets_json
from base32codec.core.errors import Base32Error
from base32codec.functions import encode as encode_data, decode as decode_data

app = typer.Typer(
    name="base32codec",
    help="Encode and decode data with the RFC4648 and Crockford base32 alphabets",
    add_completion=False,
    no_args_is_help=True,
)

console = Console()

TRUE_VALUES = ("1", "true", "yes", "on")
FALSE_VALUES = ("0", "false", "no", "off")


def get_variant(variant_flag: Optional[str] = None) -> str:
    """Resolve the variant in this order:
    1. --variant flag
    2. BASE32_VARIANT environment variable
    3. Default: rfc4648
    """
    if variant_flag is not None:
        return variant_flag
    return os.environ.get("BASE32_VARIANT") or "rfc4648"


def get_padding(padding_flag: Optional[bool] = None) -> bool:
    """Resolve padding in this order:
    1. --padding / --no-padding flag
    2. BASE32_PADDING environment variable
    3. Default: no padding
    """
    if padding_flag is not None:
        return padding_flag

    env_value = os.environ.get("BASE32_PADDING")
    if not env_value:
        return False
    if env_value.lower() in TRUE_VALUES:
        return True
    if env_value.lower() in FALSE_VALUES:
        return False
    raise ValueError(f"BASE32_PADDING must be one of {', '.join(TRUE_VALUES + FALSE_VALUES)} (got {env_value!r})")


def resolve_options(variant: Optional[str], padding: Optional[bool]):
    try:
        return get_variant(variant), get_padding(padding)
    except ValueError as e:
        console.print(f"[red]Invalid configuration: {escape(str(e))}[/]")
        raise typer.Exit(1)


def read_input(text: Optional[str], input_file: Optional[Path]) -> Optional[bytes]:
    """Raw bytes of --input, or None when neither TEXT nor --input was given."""
    if input_file is None:
        return None
    if text is not None:
        console.print("[red]Give either TEXT or --input, not both.[/]")
        raise typer.Exit(1)

    if not input_file.exists():
        console.print(f"[red]Input file not found: {escape(str(input_file))}[/]")
        raise typer.Exit(1)
    if not input_file.is_file():
        console.print(f"[red]Input path is not a file: {escape(str(input_file))}[/]")
        raise typer.Exit(1)

    try:
        return input_file.read_bytes()
    except OSError as e:
        console.print(f"[red]Failed to read {escape(str(input_file))}: {escape(str(e))}[/]")
        raise typer.Exit(1)


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", help="Log debug details to stderr"),
):
    """Convert bytes to base32 text and back."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(message)s",
            handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
            force=True,
        )


@app.command()
def encode(
    text: Optional[str] = typer.Argument(None, help="Text to encode (UTF-8). Reads stdin when omitted."),
    input_file: Optional[Path] = typer.Option(None, "--input", "-i", help="Encode the raw bytes of this file"),
    variant: Optional[str] = typer.Option(None, "--variant", help="rfc4648 or crockford (overrides BASE32_VARIANT)"),
    padding: Optional[bool] = typer.Option(None, "--padding/--no-padding", help="Pad RFC4648 output to 8-symbol blocks (overrides BASE32_PADDING)"),
):
    """Encode text, a file or stdin as base32."""
    variant, padding = resolve_options(variant, padding)

    data = read_input(text, input_file)
    if data is None:
        if text is not None:
            data = text.encode("utf-8")
        else:
            data = typer.get_binary_stream("stdin").read()

    try:
        result = encode_data(data, variant, padding)
    except Base32Error as e:
        console.print(f"[red]{escape(str(e))}[/]")
        raise typer.Exit(1)

    typer.echo(result)


@app.command()
def decode(
    text: Optional[str] = typer.Argument(None, help="Base32 text to decode. Reads stdin when omitted."),
    input_file: Optional[Path] = typer.Option(None, "--input", "-i", help="Decode the text stored in this file"),
    output: Optional[Path] = typer.Option(None, "--output", "-o", help="Write decoded bytes to this file instead of stdout"),
    as_hex: bool = typer.Option(False, "--hex", help="Print decoded bytes as hex"),
    variant: Optional[str] = typer.Option(None, "--variant", help="rfc4648 or crockford (overrides BASE32_VARIANT)"),
    padding: Optional[bool] = typer.Option(None, "--padding/--no-padding", help="Accepted for symmetry; decoding always accepts trailing padding"),
):
    """Decode base32 text back to bytes."""
    variant, padding = resolve_options(variant, padding)

    raw = read_input(text, input_file)
    if raw is not None:
        # Non-UTF-8 bytes become U+FFFD, which the decoder rejects
        text = raw.decode("utf-8", errors="replace").strip()
    elif text is None:
        # Files and pipes usually end with a newline
        text = typer.get_text_stream("stdin").read().strip()

    try:
        result = decode_data(text, variant, padding)
    except Base32Error as e:
        console.print(f"[red]{escape(str(e))}[/]")
        raise typer.Exit(1)

    if output is not None:
        try:
            output.write_bytes(result)
        except OSError as e:
            console.print(f"[red]Failed to write {escape(str(output))}: {escape(str(e))}[/]")
            raise typer.Exit(1)
        console.print(f"[green]Wrote {len(result)} bytes to {escape(str(output))}[/]")
    elif as_hex:
        typer.echo(result.hex())
    else:
        typer.echo(result, nl=False)


@app.command()
def alphabets(
    as_json: bool = typer.Option(False, "--json", help="Print RFC 8785 canonical JSON"),
    padding: Optional[bool] = typer.Option(None, "--padding/--no-padding", help="Show RFC4648 with padding enabled"),
):
    """List the supported base32 alphabets."""
    _, padding = resolve_options(None, padding)
    entries = [(name, resolve_alphabet(name, padding)) for name in SUPPORTED_VARIANTS]

    if as_json:
        typer.echo(alphabets_json(entries))
        return

    table = Table(title="Supported Alphabets")
    table.add_column("Variant")
    table.add_column("Symbols")
    table.add_column("Aliases")
    table.add_column("Padding")

    for name, alphabet in entries:
        info = alphabet.to_dict()
        aliases = ", ".join(f"{c}→{alphabet.symbols[v]}" for c, v in sorted(info["aliases"].items())) or "—"
        if not alphabet.strips_padding:
            pad = "never"
        else:
            pad = f"'{alphabet.pad_char}'" if alphabet.padding_enabled else "off"
        table.add_row(name, alphabet.symbols, aliases, pad)

    console.print(table)


if __name__ == "__main__":
    app()
