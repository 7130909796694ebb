"""Personal finance tracker storing income and expense transactions in SQLite."""

__version__ = "0.1.0"
__all__ = ["__version__"]