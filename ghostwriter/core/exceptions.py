"""
Ghostwriter Custom Exceptions

Exception classes for the client orchestration layer. Every error that reaches a
flow boundary is one of these and is turned into a toast there.
"""


class GhostwriterError(Exception):
    """Base exception for all Ghostwriter errors."""

    def __init__(self, message: str, details: dict = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self):
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


# =============================================================================
# CONFIGURATION ERRORS
# =============================================================================

class ConfigurationError(GhostwriterError):
    """Raised when there's an issue with configuration."""
    pass


class InvalidConfigError(ConfigurationError):
    """Raised when a configuration value is invalid."""
    pass


# =============================================================================
# LOCAL VALIDATION ERRORS (no network attempted)
# =============================================================================

class FlowError(GhostwriterError):
    """Base exception for errors raised by a flow before any request is sent."""
    pass


class InvalidFileTypeError(FlowError):
    """Raised when a selected file does not have an accepted extension."""

    def __init__(self, filename: str, allowed: list = None):
        message = f"Unsupported file type: '{filename}'"
        details = {"filename": filename}
        if allowed:
            details["allowed"] = list(allowed)
        super().__init__(message, details)
        self.filename = filename


class InsufficientInputError(FlowError):
    """Raised when the editor text is too short to analyze."""

    def __init__(self, length: int, minimum: int):
        message = f"Input too short: {length} < {minimum} characters"
        super().__init__(message, {"length": length, "minimum": minimum})
        self.length = length
        self.minimum = minimum


# =============================================================================
# SERVICE ERRORS
# =============================================================================

class ServiceError(GhostwriterError):
    """Base exception for failures talking to the remote service."""
    pass


class RemoteError(ServiceError):
    """Raised when the service answers with a non-2xx status or a reported error."""

    def __init__(self, status: int, remote_message: str = None):
        message = f"Service returned status {status}"
        details = {"status": status}
        if remote_message:
            message = f"{message}: {remote_message}"
            details["remote_message"] = remote_message
        super().__init__(message, details)
        self.status = status
        self.remote_message = remote_message


class TransportError(ServiceError):
    """Raised on network failure, malformed JSON or any exception during a request."""

    def __init__(self, reason: str):
        super().__init__(f"Transport failure: {reason}", {"reason": reason})
        self.reason = reason
