"""Meeting cost, waste and risk estimation."""

__version__ = "0.1.0"
