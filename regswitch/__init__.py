"""regswitch — switch npm between registry mirrors."""

__version__ = "1.0.0"
