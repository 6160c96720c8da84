"""pms - practical music search."""

from .app import Application
from .commands import Interpreter

__version__ = "0.1.0"

__all__ = ["Application", "Interpreter"]
