"""Progress bar building blocks: width helpers, width sync, priority queue and I/O proxies."""

__version__ = "0.1.0"