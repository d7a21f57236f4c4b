"""Commands: normalize, to-ns, from-ns."""

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
  tsctl normalize 5 1500000000
  tsctl normalize -- 0 -500000000
  tsctl --quiet normalize -- 3 -2000000000""",
)
@click.argument("seconds", type=int)
@click.argument("nanoseconds", type=int)
@click.pass_obj
def normalize(app: AppContext, seconds: int, nanoseconds: int) -> None:
    """Fold NANOSECONDS into SECONDS so that 0 <= nanoseconds < 1e9."""
    app.emit(app.service.normalize(seconds, nanoseconds))


@click.command(
    "to-ns",
    cls=TsCommand,
    examples="""\
  tsctl to-ns 1 500000000
  tsctl to-ns -- -1 500000000""",
)
@timespec_argument("t")
@click.pass_obj
def to_ns(app: AppContext, t: Timespec) -> None:
    """Convert a time value to a single nanosecond count."""
    app.emit(app.service.to_ns(t))


@click.command(
    "from-ns",
    cls=TsCommand,
    examples="""\
  tsctl from-ns 1500000000
  tsctl from-ns -- -500000000""",
)
@click.argument("nanoseconds", type=int)
@click.pass_obj
def from_ns(app: AppContext, nanoseconds: int) -> None:
    """Build a normalized time value from a nanosecond count."""
    app.emit(app.service.from_ns(nanoseconds))
