from hellohealth.registry.loader import (
    CheckDef,
    CheckRegistry,
    build_checker,
)

__all__ = [
    "CheckDef",
    "CheckRegistry",
    "build_checker",
]
