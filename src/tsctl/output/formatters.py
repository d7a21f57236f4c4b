"""Turn a ServiceResult into the text the CLI prints.

Three modes, picked by :class:`OutputSettings`:
- ``--json``: the full ServiceResult as JSON
- ``--quiet``: the bare answer, one line
- default: a Rich-rendered status line plus key/value pairs
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from rich.text import Text

from tsctl.output.console import create_console, get_output

if TYPE_CHECKING:
    from tsctl.services.result import ServiceResult


@dataclass(frozen=True)
class OutputSettings:
    """Output flags resolved from TsSettings."""

    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    show_total_ns: bool = False


def _is_value(data: dict[str, Any]) -> bool:
    return set(data) == {"seconds", "nanoseconds"}


def render_quiet(result: ServiceResult) -> str:
    """Render only the answer: ``SEC NSEC``, a count, or a boolean word."""
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} - {msg}"
    data = result.data
    if _is_value(data):
        return f"{data['seconds']} {data['nanoseconds']}"
    if "total_ns" in data:
        return str(data["total_ns"])
    if "equal" in data:
        return "true" if data["equal"] else "false"
    if "result" in data:
        return str(data["result"])
    if "valid" in data:
        return "valid" if data["valid"] else "invalid"
    return f"OK: {result.op}"


def render_human(result: ServiceResult, settings: OutputSettings) -> str:
    console = create_console()
    if not result.ok:
        assert result.error is not None
        console.print(
            Text("ERROR", style="ts.error"),
            Text(f"  {result.op}", style="ts.op"),
            Text(f"  {result.error.message}"),
            sep="",
        )
        if settings.verbose:
            for key, value in result.error.detail.items():
                console.print(Text(f"  {key}: ", style="ts.key"), Text(str(value)), sep="")
        return get_output(console).rstrip("\n")

    console.print(Text("OK", style="ts.ok"), Text(f"  {result.op}", style="ts.op"), sep="")
    for key, value in result.data.items():
        style = "ts.negative" if isinstance(value, int) and value < 0 else "ts.value"
        console.print(Text(f"  {key}: ", style="ts.key"), Text(str(value), style=style), sep="")
    if settings.show_total_ns and result.meta and "total_ns" in result.meta:
        console.print(
            Text("  total_ns: ", style="ts.key"),
            Text(str(result.meta["total_ns"]), style="ts.value"),
            sep="",
        )
    return get_output(console).rstrip("\n")


def format_result(result: ServiceResult, *, settings: OutputSettings | None = None) -> str:
    """Format a ServiceResult for display according to *settings*."""
    settings = settings or OutputSettings()
    if settings.json_output:
        return result.model_dump_json(indent=2)
    if settings.quiet:
        return render_quiet(result)
    return render_human(result, settings)
