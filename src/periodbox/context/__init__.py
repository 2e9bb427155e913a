# src/periodbox/context/__init__.py
"""
periodbox.context
~~~~~~~~~~~~~~~~~

Composition root.  A PeriodContext owns one DayCache and the IntervalUtility
that reads today from it; ``default_context()`` returns the process-wide
instance, built once even under concurrent first access.

Diagnostics go to loguru under the ``periodbox`` namespace, which is disabled
on import.  Applications turn it on with::

    from loguru import logger
    logger.enable("periodbox")

Basic usage::

    from periodbox.context import default_context

    ctx = default_context()
    ctx.day_cache.today()
    ctx.intervals.week_options()

Public API
----------
PeriodContext           Frozen pair of DayCache and IntervalUtility.
default_context         Lazily built process-wide PeriodContext.
reset_default_context   Forget the process-wide context (tests, forks).
loguru_diagnostics      Diagnostics sink bound to a loguru component.
"""

from __future__ import annotations

from periodbox.context.context import (
    PeriodContext,
    default_context,
    loguru_diagnostics,
    reset_default_context,
)

__all__ = [
    "PeriodContext",
    "default_context",
    "loguru_diagnostics",
    "reset_default_context",
]
