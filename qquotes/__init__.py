"""Core package for the qquotes command line tool.

The CLI front end lives in :mod:`qquotes.cli`; configuration resolution,
persistence and command dispatch are importable on their own.
"""

__version__ = "1.0.0"

__all__: list[str] = ["__version__"]
