"""Config command app for viewing promptgit configuration."""

from . import _commands as _commands
from ._app import app

__all__ = ["app"]
