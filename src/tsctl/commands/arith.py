"""Commands: add, sub, shift."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from tsctl.commands._base import TsCommand, timespec_argument

if TYPE_CHECKING:
    from tsctl.commands._context import AppContext
    from tsctl.domain.timespec import Timespec


@click.command(
    cls=TsCommand,
    examples="""\
  tsctl add 2 800000000 1 500000000
  tsctl --json add 10 0 0 250""",
)
@timespec_argument("a")
@timespec_argument("b")
@click.pass_obj
def add(app: AppContext, a: Timespec, b: Timespec) -> None:
    """Add B to A."""
    app.emit(app.service.add(a, b))


@click.command(
    cls=TsCommand,
    examples="""\
  tsctl sub 4 300000000 1 500000000
  tsctl sub 0 0 0 1""",
)
@timespec_argument("a")
@timespec_argument("b")
@click.pass_obj
def sub(app: AppContext, a: Timespec, b: Timespec) -> None:
    """Subtract B from A."""
    app.emit(app.service.sub(a, b))


@click.command(
    cls=TsCommand,
    examples="""\
  tsctl shift 1 900000000 200000000
  tsctl shift --back 1 0 1""",
)
@click.option("--back", "backward", is_flag=True, help="Move back instead of forward.")
@timespec_argument("t")
@click.argument("nanoseconds", type=int)
@click.pass_obj
def shift(app: AppContext, backward: bool, t: Timespec, nanoseconds: int) -> None:
    """Move T forward (or back) by NANOSECONDS."""
    app.emit(app.service.shift(t, nanoseconds, backward=backward))
