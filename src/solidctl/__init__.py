"""solidctl: SOLID principles demo CLI."""

__version__ = "0.1.0"
