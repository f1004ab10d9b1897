"""findr: a find-style directory-tree filtering engine."""

__version__ = "0.1.0"
