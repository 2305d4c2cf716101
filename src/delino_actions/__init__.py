"""GitHub Actions steps linking workflow runs to Delino AutoDev / DevBird tasks."""

__version__ = "0.1.0"
