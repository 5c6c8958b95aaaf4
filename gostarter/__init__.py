"""gostarter -- interactive scaffolding for Go web services."""

__version__ = "0.1.0"
