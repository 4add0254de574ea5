"""Health report: the outcome of a single health evaluation.

A report carries a status plus an open-ended bag of diagnostic info.
Mutators return the report itself so checks can be configured in a chain:

    Health().down().add_info("error", "connection refused")
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class Status(str, Enum):
    UP = "UP"
    DOWN = "DOWN"
    OUT_OF_SERVICE = "OUT OF SERVICE"
    UNKNOWN = "UNKNOWN"


@dataclass
class Health:
    """Status + diagnostic info for one check."""

    status: Status = Status.UNKNOWN
    info: dict[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        self.status = Status(self.status)
        if self.info is None:
            self.info = {}

    # ── Mutators ─────────────────────────────────────────────────────────────

    def up(self) -> Health:
        self.status = Status.UP
        return self

    def down(self) -> Health:
        self.status = Status.DOWN
        return self

    def out_of_service(self) -> Health:
        self.status = Status.OUT_OF_SERVICE
        return self

    def unknown(self) -> Health:
        self.status = Status.UNKNOWN
        return self

    def add_info(self, key: str, value: Any) -> Health:
        """Set an info value, replacing any previous value for ``key``."""
        self.info[key] = value
        return self

    # ── Queries ──────────────────────────────────────────────────────────────

    def get_info(self, key: str) -> Any:
        """Return the info value for ``key``, or None if it was never added."""
        return self.info.get(key)

    def is_up(self) -> bool:
        return self.status == Status.UP

    def is_down(self) -> bool:
        return self.status == Status.DOWN

    def is_out_of_service(self) -> bool:
        return self.status == Status.OUT_OF_SERVICE

    def is_unknown(self) -> bool:
        return self.status == Status.UNKNOWN

    # ── Rendering ────────────────────────────────────────────────────────────

    def to_dict(self) -> dict[str, Any]:
        """Render as a flat mapping of info keys plus ``"status"``.

        The real status is written after the info keys, so a checker that adds
        its own ``"status"`` info can never mask it. Nested reports are
        rendered recursively.
        """
        data = {key: _render(value) for key, value in self.info.items()}
        data["status"] = self.status.value
        return data

    def to_json(self, indent: int | None = None) -> str:
        return json.dumps(self.to_dict(), indent=indent, sort_keys=True)


def _render(value: Any) -> Any:
    if isinstance(value, Health):
        return value.to_dict()
    if isinstance(value, dict):
        return {k: _render(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [_render(v) for v in value]
    return value
