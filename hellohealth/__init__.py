"""hellohealth: hello world pages plus an aggregated /health endpoint."""

__version__ = "0.1.0"
