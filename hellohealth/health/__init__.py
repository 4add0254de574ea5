"""Health subsystem: reports, checkers, composite aggregation, built-in probes."""

from .checker import Checker, CheckerFunc, CompositeChecker
from .probes import DiskSpaceChecker, TCPChecker, URLChecker
from .report import Health, Status

__all__ = [
    "Checker",
    "CheckerFunc",
    "CompositeChecker",
    "DiskSpaceChecker",
    "Health",
    "Status",
    "TCPChecker",
    "URLChecker",
]
