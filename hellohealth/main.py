"""Entry point for hellohealth."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

import uvicorn
from rich.console import Console
from rich.panel import Panel
from rich.syntax import Syntax

from hellohealth.api.server import create_app
from hellohealth.config import settings
from hellohealth.health.checker import CompositeChecker
from hellohealth.registry import CheckRegistry

console = Console()
logging.basicConfig(
    level=getattr(logging, settings.log_level.upper(), logging.INFO),
    format="%(asctime)s [%(name)s] %(levelname)s: %(message)s",
)


def build_root_checker(checks_file: str | None = None) -> CompositeChecker:
    """Load checks.yaml and wire the root checker."""
    path = Path(checks_file or settings.checks_file)
    if not path.is_absolute():
        path = Path.cwd() / path
    return CheckRegistry(path=path).build()


def run_server(checks_file: str | None = None) -> None:
    """Start the HTTP server."""
    console.print(Panel("Starting hellohealth server", style="bold green"))
    app = create_app(checker=build_root_checker(checks_file), data_dir=settings.data_dir)
    uvicorn.run(app, host=settings.api_host, port=settings.api_port)


def run_check(checks_file: str | None = None) -> int:
    """Run all checks once, print the report, return the exit code."""
    report = build_root_checker(checks_file).check()
    console.print(Syntax(report.to_json(indent=2), "json"))

    style = "bold red" if report.is_down() else "bold green"
    console.print(f"\n[{style}]{report.status.value}[/{style}]")
    return 1 if report.is_down() else 0


def main() -> None:
    parser = argparse.ArgumentParser(description="hellohealth")
    parser.add_argument("--checks", help="Path to checks.yaml (default: CHECKS_FILE)")
    sub = parser.add_subparsers(dest="command")

    sub.add_parser("serve", help="Start the HTTP server")
    sub.add_parser("check", help="Run every check once and print the report")

    args = parser.parse_args()

    if args.command == "serve":
        run_server(args.checks)
    elif args.command == "check":
        sys.exit(run_check(args.checks))
    else:
        parser.print_help()
        sys.exit(1)


if __name__ == "__main__":
    main()
