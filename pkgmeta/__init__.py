"""Package metadata modelling and manifest generation."""

__version__ = "0.1.0"
