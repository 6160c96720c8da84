"""Application-level exception types for pms."""

from __future__ import annotations


class PmsError(Exception):
    """Base exception for pms."""


class ConfigurationError(PmsError):
    """Raised when settings are missing or invalid."""


class ParseError(PmsError):
    """Raised when a command line is lexically or syntactically invalid."""


class ExecError(PmsError):
    """Raised when a well-formed command cannot run in the current state."""


class NotImplementedCommandError(ExecError):
    """Raised for recognized commands that are not supported yet."""


class RemoteError(PmsError):
    """Raised when the remote music service fails a request."""


class AuthenticationError(RemoteError):
    """Raised when no authenticated remote session is available."""
