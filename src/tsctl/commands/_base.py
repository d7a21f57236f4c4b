"""Custom Click base classes and shared argument helpers.

TsCommand and TsGroup accept an ``examples`` parameter; passing
``--examples`` prints them and exits, keeping ``--help`` short.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, TypeVar

import click

from tsctl.domain.timespec import Timespec

_F = TypeVar("_F", bound=Callable[..., Any])


def _add_examples_option(cmd: click.Command, examples: str) -> None:
    """Attach an eager ``--examples`` flag to a Click command or group."""

    def show_examples(ctx: click.Context, _param: click.Parameter, value: bool) -> None:
        if not value:
            return
        click.echo(f"Examples for '{ctx.command_path}':\n")
        click.echo(examples)
        ctx.exit(0)

    cmd.params.append(
        click.Option(
            ["--examples"],
            is_flag=True,
            expose_value=False,
            is_eager=True,
            callback=show_examples,
            help="Show usage examples.",
        )
    )


class TsCommand(click.Command):
    """Click Command subclass that supports an ``--examples`` flag."""

    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.examples = examples
        if examples:
            _add_examples_option(self, examples)


class TsGroup(click.Group):
    """Click Group whose subcommands default to :class:`TsCommand`."""

    command_class = TsCommand

    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.examples = examples
        if examples:
            _add_examples_option(self, examples)


def timespec_argument(name: str) -> Callable[[_F], _F]:
    """Declare a time value argument read as two integers: SECONDS NANOSECONDS.

    The command receives a :class:`Timespec` built from the raw fields,
    without normalization.
    """

    def to_timespec(
        _ctx: click.Context, _param: click.Parameter, value: tuple[int, int]
    ) -> Timespec:
        seconds, nanoseconds = value
        return Timespec(seconds, nanoseconds)

    return click.argument(
        name,
        nargs=2,
        type=int,
        metavar=f"{name.upper()}_SEC {name.upper()}_NSEC",
        callback=to_timespec,
    )
