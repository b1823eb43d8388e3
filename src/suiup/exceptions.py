"""Custom exception hierarchy for suiup.

Every user-visible error condition inherits from :class:`SuiupError` so the
CLI error boundary can render a message and an optional hint without a
stack trace.  Raw third-party exceptions (``requests``, entry-point loading)
are caught in the infrastructure layer and re-raised as a subclass.

Hierarchy
---------
SuiupError
├── InvalidBinaryNameError
├── InvalidSpecifierFormatError
├── UnsupportedOptionError
├── ConfigurationError
├── ToolchainUnavailableError
├── UpdateCheckError
└── EnvironmentError
"""

from __future__ import annotations


class SuiupError(Exception):
    """Base exception for all suiup errors."""

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Specifier parsing -----------------------------------------------------

class InvalidBinaryNameError(SuiupError):
    """Raised when a token does not name one of the known binaries."""

    def __init__(self, token: str) -> None:
        super().__init__(
            f"Invalid binary name: {token}. "
            "Use `suiup list` to find available binaries to install.",
        )
        self.token: str = token


class InvalidSpecifierFormatError(SuiupError):
    """Raised when a specifier splits into an unsupported number of parts."""

    def __init__(self, token: str) -> None:
        super().__init__(
            "Invalid format. Use 'binary' or 'binary version'",
            hint="Examples: 'sui', 'sui@testnet', 'sui@testnet-1.39.3'",
        )
        self.token: str = token


class UnsupportedOptionError(SuiupError):
    """Raised when a flag is not valid for the selected binary."""


# --- Configuration ---------------------------------------------------------

class ConfigurationError(SuiupError):
    """Raised when a flag or environment variable holds an invalid value."""


# --- Collaborators ---------------------------------------------------------

class ToolchainUnavailableError(SuiupError):
    """Raised when no toolchain backend is registered or it fails to load."""


class UpdateCheckError(SuiupError):
    """Raised inside the update check; never reaches the error boundary."""


# --- Environment / tooling -------------------------------------------------

class EnvironmentError(SuiupError):
    """Raised when an optional runtime dependency is not available."""
