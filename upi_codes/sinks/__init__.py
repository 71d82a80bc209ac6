"""Output sinks for simulated outcomes."""

from upi_codes.sinks.console import ConsoleSink

__all__ = ["ConsoleSink"]
