"""Checkers: anything with a no-argument ``check()`` returning a Health report.

CompositeChecker aggregates named checkers into one report and is itself a
checker, so groups nest to any depth:

    companies = CompositeChecker()
    companies.add_checker("Google", URLChecker("https://www.google.com/"))

    root = CompositeChecker()
    root.add_checker("Big Companies", companies)
    root.check().to_dict()
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Protocol, runtime_checkable

from .report import Health

logger = logging.getLogger(__name__)


@runtime_checkable
class Checker(Protocol):
    def check(self) -> Health: ...


class CheckerFunc:
    """Adapter so a plain function can be registered as a Checker."""

    def __init__(self, fn: Callable[[], Health]) -> None:
        self._fn = fn

    def check(self) -> Health:
        return self._fn()

    def __repr__(self) -> str:
        return f"CheckerFunc({getattr(self._fn, '__name__', self._fn)!r})"


@dataclass(frozen=True)
class _Entry:
    name: str
    checker: Checker


class CompositeChecker:
    """Runs every registered checker and folds the results into one report.

    The aggregate starts UP and turns DOWN on the first sub-report that is not
    UP (OUT OF SERVICE and UNKNOWN included). Each sub-report is stored under
    its registration name; extra info is merged afterwards as sibling keys.
    Duplicate names overwrite, last one wins.

    Wire everything with add_checker/add_info before serving: check() only
    reads the configuration and does not lock it.
    """

    def __init__(self) -> None:
        self._entries: list[_Entry] = []
        self._info: dict[str, Any] = {}

    def add_checker(self, name: str, checker: Checker) -> None:
        self._entries.append(_Entry(name=name, checker=checker))

    def add_info(self, key: str, value: Any) -> CompositeChecker:
        self._info[key] = value
        return self

    @property
    def names(self) -> list[str]:
        return [e.name for e in self._entries]

    def __len__(self) -> int:
        return len(self._entries)

    def check(self) -> Health:
        health = Health().up()

        for entry in self._entries:
            result = entry.checker.check()
            logger.debug("Check %s: %s", entry.name, result.status.value)

            if not result.is_up() and not health.is_down():
                logger.warning(
                    "Aggregate is DOWN: %s reported %s", entry.name, result.status.value,
                )
                health.down()

            health.add_info(entry.name, result)

        for key, value in self._info.items():
            health.add_info(key, value)

        return health
