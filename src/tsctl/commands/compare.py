"""Commands: equal, compare, check."""

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
  tsctl equal 5 100 5 100
  tsctl equal 1 0 0 1000000000""",
)
@timespec_argument("a")
@timespec_argument("b")
@click.pass_obj
def equal(app: AppContext, a: Timespec, b: Timespec) -> None:
    """Check whether A and B have identical fields."""
    app.emit(app.service.equal(a, b))


@click.command(
    cls=TsCommand,
    examples="""\
  tsctl compare 5 100 5 200
  tsctl --quiet compare 6 0 5 999999999""",
)
@timespec_argument("a")
@timespec_argument("b")
@click.pass_obj
def compare(app: AppContext, a: Timespec, b: Timespec) -> None:
    """Order A against B (negative, zero or positive)."""
    app.emit(app.service.compare(a, b))


@click.command(
    cls=TsCommand,
    examples="""\
  tsctl check 0 999999999
  tsctl check -- -1 0""",
)
@timespec_argument("t")
@click.pass_obj
def check(app: AppContext, t: Timespec) -> None:
    """Check that T is a non-negative, normalized timestamp."""
    app.emit(app.service.check(t))
