"""GitHub Actions runner integration."""

from .io import ActionIO

__all__ = ["ActionIO"]
