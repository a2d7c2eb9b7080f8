from typing import Any, Dict, Optional


class HandlerError(Exception):
    """Error that terminates a single request and is shaped into a JSON response."""

    status_code: int = 500

    def __init__(self, message: str, details: Optional[str] = None, origin: str = "*"):
        super().__init__(message)
        self.message = message
        self.details = details
        self.origin = origin

    def to_payload(self) -> Dict[str, Any]:
        payload: Dict[str, Any] = {"error": self.message}
        if self.details is not None:
            payload["details"] = self.details
        return payload


class ConfigurationError(HandlerError):
    status_code = 500


class ValidationError(HandlerError):
    status_code = 400


class MethodError(HandlerError):
    status_code = 405


class DependencyError(HandlerError):
    status_code = 500
