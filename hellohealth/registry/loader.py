"""Check registry: loads checks.yaml and wires the checker tree.

Single source of truth for which dependencies the /health endpoint reports.
Top-level ``info`` becomes extra info on the root; ``group`` entries become
nested CompositeCheckers.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

from ..health.checker import Checker, CheckerFunc, CompositeChecker
from ..health.probes import DiskSpaceChecker, TCPChecker, URLChecker
from ..health.report import Health

logger = logging.getLogger(__name__)

REGISTRY_PATH = Path("checks.yaml")


# ── Data models ──────────────────────────────────────────────────────────────


@dataclass
class CheckDef:
    """Definition of a single check (or group of checks) from the registry."""

    name: str
    type: str = "url"  # url | tcp | disk | group
    url: str = ""
    method: str = "GET"
    expected_status: int = 200
    host: str = ""
    port: int = 0
    path: str = "/"
    threshold_bytes: int = 0
    timeout_ms: int = 10_000
    info: dict[str, Any] = field(default_factory=dict)  # for groups
    checks: list[CheckDef] = field(default_factory=list)  # for groups


# ── Registry ─────────────────────────────────────────────────────────────────


class CheckRegistry:
    """Loads and caches check definitions from checks.yaml."""

    def __init__(self, path: Path | None = None) -> None:
        self._path = path or REGISTRY_PATH
        self._checks: list[CheckDef] = []
        self._info: dict[str, Any] = {}
        self._loaded = False

    def load(self, force: bool = False) -> list[CheckDef]:
        """Parse checks.yaml and return the top-level CheckDef list."""
        if self._loaded and not force:
            return self._checks

        self._checks = []
        self._info = {}
        if not self._path.exists():
            logger.warning("Checks file not found: %s", self._path)
            self._loaded = True
            return self._checks

        try:
            raw = yaml.safe_load(self._path.read_text(encoding="utf-8")) or {}
        except (OSError, yaml.YAMLError) as e:
            logger.error("Failed to parse %s: %s", self._path, e)
            self._loaded = True
            return self._checks

        if not isinstance(raw, dict) or not isinstance(raw.get("info") or {}, dict):
            logger.error("Malformed %s: expected a mapping with 'info' and 'checks'", self._path)
            self._loaded = True
            return self._checks

        entries = raw.get("checks") or []
        if not isinstance(entries, list):
            logger.error("Malformed %s: 'checks' must be a list", self._path)
            self._loaded = True
            return self._checks

        self._info = dict(raw.get("info") or {})
        self._checks = _parse_checks(entries)

        self._loaded = True
        logger.info("Loaded %d checks from %s", len(self._checks), self._path)
        return self._checks

    @property
    def checks(self) -> list[CheckDef]:
        return self.load()

    @property
    def info(self) -> dict[str, Any]:
        self.load()
        return self._info

    def names(self) -> list[str]:
        return [c.name for c in self.checks]

    def reload(self) -> list[CheckDef]:
        """Force reload from disk."""
        return self.load(force=True)

    def build(self) -> CompositeChecker:
        """Build the root CompositeChecker from the loaded definitions."""
        root = _build_group(self.checks, self.info)
        logger.info("Checker tree built: %d top-level checks", len(root))
        return root


# ── Parsers ──────────────────────────────────────────────────────────────────


def _parse_checks(entries: list[Any]) -> list[CheckDef]:
    checks = []
    for entry in entries:
        try:
            checks.append(_parse_check(entry))
        except (ValueError, TypeError, AttributeError) as e:
            logger.warning("Skipping malformed check entry: %s", e)
    return checks


def _parse_check(raw: dict[str, Any]) -> CheckDef:
    name = str(raw.get("name") or "").strip()
    if not name:
        raise ValueError("Check 'name' is required")

    nested = raw.get("checks") or []
    if not isinstance(nested, list):
        raise ValueError(f"Check '{name}': 'checks' must be a list")

    return CheckDef(
        name=name,
        type=str(raw.get("type", "url")),
        url=str(raw.get("url", "")),
        method=str(raw.get("method", "GET")),
        expected_status=int(raw.get("expected_status", 200)),
        host=str(raw.get("host", "")),
        port=int(raw.get("port", 0)),
        path=str(raw.get("path", "/")),
        threshold_bytes=int(raw.get("threshold_bytes", 0)),
        timeout_ms=int(raw.get("timeout_ms", 10_000)),
        info=dict(raw.get("info") or {}),
        checks=_parse_checks(nested),
    )


# ── Wiring ───────────────────────────────────────────────────────────────────


def _build_group(checks: list[CheckDef], info: dict[str, Any]) -> CompositeChecker:
    group = CompositeChecker()
    for check_def in checks:
        group.add_checker(check_def.name, build_checker(check_def))
    for key, value in info.items():
        group.add_info(key, value)
    return group


def build_checker(check_def: CheckDef) -> Checker:
    """Turn one CheckDef into a Checker, by type."""
    if check_def.type == "group":
        return _build_group(check_def.checks, check_def.info)
    if check_def.type == "url":
        return URLChecker(
            check_def.url, check_def.method, check_def.expected_status, check_def.timeout_ms,
        )
    if check_def.type == "tcp":
        return TCPChecker(check_def.host, check_def.port, check_def.timeout_ms)
    if check_def.type == "disk":
        return DiskSpaceChecker(check_def.path, check_def.threshold_bytes)

    logger.warning("Unknown check type for %s: %s", check_def.name, check_def.type)
    message = f"Unknown check type: {check_def.type}"
    return CheckerFunc(lambda: Health().unknown().add_info("error", message))
