"""payinstruct: payment instruction interpreter."""

__version__ = "0.1.0"
