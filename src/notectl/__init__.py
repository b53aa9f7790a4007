"""notectl — plain-text note management without a database."""

__version__ = "0.3.0"
