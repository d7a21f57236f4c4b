"""TimespecService — time value arithmetic behind the ServiceResult contract.

The domain functions are total over integers and never fail. This layer
adds the checks a caller usually wants at a boundary: operands that are not
normalized are flagged (or rejected in strict mode) and shift offsets must
be non-negative.
"""

from __future__ import annotations

from typing import Any

import structlog

from tsctl.config.models import ArithConfig
from tsctl.domain.timespec import (
    Timespec,
    add,
    add_ns,
    compare,
    equal,
    from_ns,
    is_normalized,
    is_valid,
    normalize,
    sub,
    sub_ns,
    to_ns,
)
from tsctl.services.result import ErrorCode, ServiceResult

logger = structlog.get_logger(__name__)


def _value_result(op: str, value: Timespec, warnings: list[str]) -> ServiceResult:
    logger.debug(op, result=value.as_dict())
    return ServiceResult.success(
        op,
        value.as_dict(),
        warnings=warnings,
        meta={"total_ns": to_ns(value)},
    )


class TimespecService:
    """Run time value operations and report results as ServiceResult.

    Usage::

        svc = TimespecService(ArithConfig(strict=True))
        result = svc.add(Timespec(2, 800_000_000), Timespec(1, 500_000_000))
        result.data  # {"seconds": 4, "nanoseconds": 300000000}
    """

    def __init__(self, config: ArithConfig | None = None) -> None:
        self._config = config or ArithConfig()

    @property
    def strict(self) -> bool:
        return self._config.strict

    def _check_operands(
        self, op: str, operands: dict[str, Timespec], warnings: list[str]
    ) -> ServiceResult | None:
        """Flag operands that break the normalized invariant.

        Returns an error result in strict mode, otherwise appends a warning
        per offending operand and returns None.
        """
        bad = {name: t for name, t in operands.items() if not is_normalized(t)}
        if not bad:
            return None
        if self.strict:
            names = ", ".join(bad)
            logger.warning("operands.rejected", op=op, operands=names)
            return ServiceResult.failure(
                op,
                ErrorCode.NOT_NORMALIZED,
                f"Operand not normalized: {names}",
                operands={name: t.as_dict() for name, t in bad.items()},
            )
        for name, t in bad.items():
            logger.debug("operand.not_normalized", op=op, operand=name, **t.as_dict())
            warnings.append(f"Operand '{name}' is not normalized: {t.seconds}s {t.nanoseconds}ns")
        return None

    # ── Construction and conversion ──────────────────────────────────

    def normalize(self, seconds: int, nanoseconds: int) -> ServiceResult:
        return _value_result("normalize", normalize(seconds, nanoseconds), [])

    def to_ns(self, t: Timespec) -> ServiceResult:
        warnings: list[str] = []
        rejected = self._check_operands("to_ns", {"t": t}, warnings)
        if rejected is not None:
            return rejected
        total = to_ns(t)
        logger.debug("to_ns", **t.as_dict(), total_ns=total)
        return ServiceResult.success("to_ns", {"total_ns": total}, warnings=warnings)

    def from_ns(self, nanoseconds: int) -> ServiceResult:
        return _value_result("from_ns", from_ns(nanoseconds), [])

    # ── Comparison ───────────────────────────────────────────────────

    def equal(self, a: Timespec, b: Timespec) -> ServiceResult:
        warnings: list[str] = []
        rejected = self._check_operands("equal", {"a": a, "b": b}, warnings)
        if rejected is not None:
            return rejected
        same = equal(a, b)
        logger.debug("equal", a=a.as_dict(), b=b.as_dict(), equal=same)
        return ServiceResult.success("equal", {"equal": same}, warnings=warnings)

    def compare(self, a: Timespec, b: Timespec) -> ServiceResult:
        warnings: list[str] = []
        rejected = self._check_operands("compare", {"a": a, "b": b}, warnings)
        if rejected is not None:
            return rejected
        cmp = compare(a, b)
        order = "less" if cmp < 0 else "greater" if cmp > 0 else "equal"
        logger.debug("compare", a=a.as_dict(), b=b.as_dict(), result=cmp)
        return ServiceResult.success(
            "compare", {"result": cmp, "order": order}, warnings=warnings
        )

    def check(self, t: Timespec) -> ServiceResult:
        """Report whether *t* is a valid timestamp.

        Never fails: an invalid value is a successful check with
        ``valid=False``.
        """
        data: dict[str, Any] = {"valid": is_valid(t), "normalized": is_normalized(t)}
        warnings: list[str] = []
        if not data["normalized"]:
            warnings.append("nanoseconds outside [0, 1000000000)")
        elif t.seconds < 0:
            warnings.append("negative seconds: a duration, not a timestamp")
        logger.debug("check", **t.as_dict(), **data)
        return ServiceResult.success("check", data, warnings=warnings)

    # ── Arithmetic ───────────────────────────────────────────────────

    def add(self, a: Timespec, b: Timespec) -> ServiceResult:
        warnings: list[str] = []
        rejected = self._check_operands("add", {"a": a, "b": b}, warnings)
        if rejected is not None:
            return rejected
        return _value_result("add", add(a, b), warnings)

    def sub(self, a: Timespec, b: Timespec) -> ServiceResult:
        warnings: list[str] = []
        rejected = self._check_operands("sub", {"a": a, "b": b}, warnings)
        if rejected is not None:
            return rejected
        return _value_result("sub", sub(a, b), warnings)

    def shift(self, t: Timespec, nanoseconds: int, *, backward: bool = False) -> ServiceResult:
        """Move *t* forward (or back) by a non-negative nanosecond count."""
        if nanoseconds < 0:
            logger.warning("shift.negative_offset", nanoseconds=nanoseconds)
            return ServiceResult.failure(
                "shift",
                ErrorCode.NEGATIVE_OFFSET,
                f"Offset must be non-negative, got {nanoseconds}",
                nanoseconds=nanoseconds,
            )
        warnings: list[str] = []
        rejected = self._check_operands("shift", {"t": t}, warnings)
        if rejected is not None:
            return rejected
        value = sub_ns(t, nanoseconds) if backward else add_ns(t, nanoseconds)
        return _value_result("shift", value, warnings)
