"""Terminal dashboard showing counters, registers, tables, multicast groups and ports via rtecli."""

__version__ = "1.0.0"