"""Jump between favourite directories with single-key shortcuts."""

__version__ = "0.3.0"
