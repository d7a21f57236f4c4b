"""tsctl — exact seconds/nanoseconds time arithmetic."""

__version__ = "0.1.0"
