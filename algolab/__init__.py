"""Classic data structures, graph searches, maze path-finding and algorithm exercises."""

__version__ = "0.1.0"