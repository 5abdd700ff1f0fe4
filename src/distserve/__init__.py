"""distserve - static host for single-page application builds."""

__version__ = "0.1.0"
