"""Kernel time – Clock port + implementations."""
from eventfold.kernel.time.clock import Clock, FrozenClock, SystemClock, iso_now, parse_iso

__all__ = ["Clock", "FrozenClock", "SystemClock", "iso_now", "parse_iso"]
