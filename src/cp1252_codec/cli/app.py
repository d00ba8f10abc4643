"""Typer CLI application for inspecting the CP-1252 tables."""

import json
import unicodedata
from typing import Annotated, NoReturn, Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from cp1252_codec.core.constants import SUBSTITUTE


def parse_byte(text: str) -> int:
    """Parse a byte given as decimal (128) or prefixed hex (0x80)."""
    try:
        value = int(text.strip(), 0)
    except ValueError:
        raise ValueError(f"not a byte value: {text!r}") from None
    if not 0 <= value <= 0xFF:
        raise ValueError(f"byte out of range 0x00-0xFF: {text!r}")
    return value


def parse_code_point(text: str) -> int:
    """
    Parse a code point argument.

    Accepts ``U+20AC``, ``0x20ac``, ``8364`` or a single literal
    character. Negative numbers are allowed; they simply have no mapping.
    """
    if text.upper().startswith("U+"):
        try:
            return int(text[2:], 16)
        except ValueError:
            raise ValueError(f"bad code point: {text!r}") from None
    try:
        return int(text, 0)
    except ValueError:
        pass
    if len(text) == 1:
        return ord(text)
    raise ValueError(f"bad code point: {text!r}")


def parse_hex_bytes(parts: list[str]) -> bytes:
    """Parse ``e2 82 ac``, ``e282ac`` or ``0xe2 0x82 0xac`` into bytes."""
    joined = "".join(p.lower().removeprefix("0x") for p in parts)
    try:
        return bytes.fromhex(joined)
    except ValueError:
        raise ValueError(f"bad hex bytes: {' '.join(parts)!r}") from None


def describe(code_point: int) -> str:
    """Unicode name for a code point, or a placeholder for controls."""
    return unicodedata.name(chr(code_point), "<control>")


def _hex_bytes(data: bytes) -> str:
    return " ".join(f"{b:02X}" for b in data)


def _is_printable(code_point: int) -> bool:
    return code_point >= 0x20 and not 0x7F <= code_point <= 0x9F


def _version_callback(value: bool) -> None:
    if value:
        from cp1252_codec import __version__
        print(f"cp1252-codec {__version__}")
        raise typer.Exit()


def create_app() -> typer.Typer:
    """Create and configure the CLI application."""
    app = typer.Typer(
        name="cp1252",
        help="Inspect CP-1252 <-> Unicode conversions one byte at a time.",
        no_args_is_help=True,
        rich_markup_mode="rich",
    )
    console = Console()

    def fail(message: str) -> NoReturn:
        console.print(f"[red]{escape(message)}[/]")
        raise typer.Exit(1)

    @app.callback()
    def root(
        version: Annotated[
            Optional[bool],
            typer.Option("--version", callback=_version_callback, is_eager=True, help="Show version and exit"),
        ] = None,
    ) -> None:
        """Inspect CP-1252 <-> Unicode conversions one byte at a time."""

    @app.command()
    def decode(
        byte: Annotated[str, typer.Argument(help="CP-1252 byte, e.g. 0x80 or 128")],
        json_output: Annotated[bool, typer.Option("--json", "-j", help="Output as JSON")] = False,
    ) -> None:
        """Show the Unicode code point for a CP-1252 byte."""
        import cp1252_codec as cp

        try:
            value = parse_byte(byte)
        except ValueError as e:
            fail(str(e))

        code_point = cp.decode(value)
        utf8 = cp.cp1252_to_utf8(value)

        if json_output:
            data = {
                "byte": value,
                "code_point": code_point,
                "name": describe(code_point),
                "utf8": utf8.hex(),
                "defined": cp.is_defined(value),
            }
            print(json.dumps(data, indent=2))
            return

        console.print(f"[bold]0x{value:02X}[/] → U+{code_point:04X} {describe(code_point)}")
        console.print(f"  [bold]UTF-8:[/] {_hex_bytes(utf8)}")
        if not cp.is_defined(value):
            console.print("  [yellow]Undefined in CP-1252 (best-fit mapping)[/]")

    @app.command()
    def encode(
        code_point: Annotated[str, typer.Argument(help="U+20AC, 0x20ac, 8364 or a single character")],
        json_output: Annotated[bool, typer.Option("--json", "-j", help="Output as JSON")] = False,
    ) -> None:
        """Show the CP-1252 byte for a Unicode code point."""
        import cp1252_codec as cp

        try:
            value = parse_code_point(code_point)
        except ValueError as e:
            fail(str(e))

        byte = cp.encode(value)
        # 0x1A is also the exact mapping of U+001A
        mapped = byte != SUBSTITUTE or value == SUBSTITUTE

        if json_output:
            print(json.dumps({"code_point": value, "byte": byte, "mapped": mapped}, indent=2))
            return

        label = f"U+{value:04X}" if value >= 0 else str(value)
        if mapped:
            console.print(f"[bold]{label}[/] → 0x{byte:02X}")
        else:
            console.print(f"[bold]{label}[/] → 0x{byte:02X} [yellow](no mapping, substitute)[/]")

    @app.command("from-utf8")
    def from_utf8(
        data: Annotated[list[str], typer.Argument(help="UTF-8 bytes in hex, e.g. e2 82 ac")],
        json_output: Annotated[bool, typer.Option("--json", "-j", help="Output as JSON")] = False,
    ) -> None:
        """Transcode one UTF-8 sequence to a CP-1252 byte."""
        import cp1252_codec as cp

        try:
            raw = parse_hex_bytes(data)
        except ValueError as e:
            fail(str(e))
        if not raw:
            fail("no input bytes")

        byte, consumed = cp.utf8_to_cp1252(raw)

        if json_output:
            print(json.dumps({"byte": byte, "consumed": consumed}, indent=2))
            return

        console.print(f"[bold]{_hex_bytes(raw[:consumed])}[/] → 0x{byte:02X} ({consumed} consumed)")
        if consumed < len(raw):
            console.print(f"  [dim]Unread: {_hex_bytes(raw[consumed:])}[/]")

    @app.command("to-utf8")
    def to_utf8(
        byte: Annotated[str, typer.Argument(help="CP-1252 byte, e.g. 0x80 or 128")],
        json_output: Annotated[bool, typer.Option("--json", "-j", help="Output as JSON")] = False,
    ) -> None:
        """Transcode one CP-1252 byte to UTF-8."""
        import cp1252_codec as cp

        try:
            value = parse_byte(byte)
        except ValueError as e:
            fail(str(e))

        utf8 = cp.cp1252_to_utf8(value)

        if json_output:
            print(json.dumps({"byte": value, "utf8": utf8.hex(), "length": len(utf8)}, indent=2))
            return

        console.print(f"[bold]0x{value:02X}[/] → {_hex_bytes(utf8)}")

    @app.command()
    def table() -> None:
        """Show the full CP-1252 code page."""
        import cp1252_codec as cp

        grid = Table(title="CP-1252", box=None, padding=(0, 1))
        grid.add_column("", style="bold")
        for low in range(16):
            grid.add_column(f"_{low:X}", justify="center")

        for high in range(16):
            cells = []
            for low in range(16):
                value = high << 4 | low
                code_point = cp.decode(value)
                if not cp.is_defined(value):
                    cells.append(f"[red]{code_point:02X}[/]")
                elif _is_printable(code_point):
                    cells.append(escape(chr(code_point)))
                else:
                    cells.append(f"[dim]{code_point:02X}[/]")
            grid.add_row(f"{high:X}_", *cells)

        console.print(grid)
        console.print("[red]red[/]: undefined, best-fit C1 control  [dim]dim[/]: control character")

    return app
