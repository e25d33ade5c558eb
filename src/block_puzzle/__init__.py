"""Block placement puzzle engine with a Gymnasium adapter."""

__version__ = "0.1.0"
