"""Cache command app for the file-backed branch cache."""

from . import _commands as _commands
from ._app import app

__all__ = ["app"]
