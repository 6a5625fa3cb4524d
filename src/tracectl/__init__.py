"""tracectl: command-line client for the tracing test platform."""

__version__ = "0.1.0"
