"""Root CLI group for tsctl with global flags and command registration."""

from __future__ import annotations

import click

from tsctl import __version__
from tsctl.commands import register_commands
from tsctl.commands._base import TsGroup
from tsctl.commands._context import AppContext
from tsctl.config.settings import TsSettings


@click.group(
    cls=TsGroup,
    invoke_without_command=True,
    examples="""\
  tsctl add 2 800000000 1 500000000
  tsctl --strict compare 5 100 5 200
  tsctl -q normalize -- 0 -500000000""",
)
@click.version_option(version=__version__, prog_name="tsctl")
@click.option("--json", "json_output", is_flag=True, help="Structured JSON output.")
@click.option("-q", "--quiet", is_flag=True, help="Print only the answer.")
@click.option("-v", "--verbose", is_flag=True, help="Detailed output with debug logs.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.option("--strict", is_flag=True, help="Reject operands that are not normalized.")
@click.option("-c", "--config", "config_path", default=None, help="Override config file path.")
@click.pass_context
def cli(
    ctx: click.Context,
    json_output: bool,
    quiet: bool,
    verbose: bool,
    log_json: bool,
    strict: bool,
    config_path: str | None,
) -> None:
    """tsctl — exact seconds/nanoseconds time arithmetic.

    Time values are given as two integers, SECONDS NANOSECONDS. Put
    negative numbers after ``--``.
    """
    settings = TsSettings.from_cli(
        config_path=config_path,
        strict=strict,
        json_output=json_output,
        quiet=quiet,
        verbose=verbose,
        log_json=log_json,
    )
    ctx.obj = AppContext(settings)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)
