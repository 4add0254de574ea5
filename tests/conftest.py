"""Shared test fixtures."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import pytest

from hellohealth.health.checker import CheckerFunc
from hellohealth.health.report import Health, Status


@pytest.fixture
def fixed_checker() -> Callable[..., CheckerFunc]:
    """Factory for checkers that always report the given status + info."""

    def _make(status: Status, **info: Any) -> CheckerFunc:
        def _check() -> Health:
            health = Health(status=status)
            for key, value in info.items():
                health.add_info(key, value)
            return health

        return CheckerFunc(_check)

    return _make
