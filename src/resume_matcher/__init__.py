"""Resume vs. job description matching and optimization reports."""

__version__ = "0.1.0"
