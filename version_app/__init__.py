"""version-app: demo service reporting its version, host and database status."""

__version__ = "1.0.0"
