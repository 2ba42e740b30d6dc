"""Building blocks for compressed web graphs: codings, integer iterators, properties files and loggers."""

__version__ = "0.1.0"