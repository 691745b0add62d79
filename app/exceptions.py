from typing import Any, Mapping, Optional

from domain.schemas.meal_text_schemas import ParseFailure


class ServiceValidationError(Exception):
    """Raised when input data is invalid or a precondition for a service call is not met.

    Attributes:
        message: human-readable message
        details: optional mapping with extra context (field errors, validation info)
        code: optional machine-readable error code
        http_status: suggested HTTP status code for handlers (400)
    """

    http_status = 400

    def __init__(self, message: str = "Invalid input", details: Optional[Mapping[str, Any]] = None, code: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.details = details
        self.code = code

    def to_dict(self) -> dict:
        payload: dict[str, Any] = {"message": self.message}
        if self.code:
            payload["code"] = self.code
        if self.details:
            payload["details"] = self.details
        return payload

    def __str__(self) -> str:
        return self.message


class EmptyInputError(ServiceValidationError):
    """Raised by the meal text parser when the trimmed input has zero length.

    This is the parser's only hard failure. ``reason`` is the short string
    surfaced to callers; no partial result ever accompanies it.
    """

    reason = "empty input"

    def __init__(self, details: Optional[Mapping[str, Any]] = None):
        super().__init__(self.reason, details=details, code="EMPTY_INPUT")

    def to_failure(self) -> ParseFailure:
        return ParseFailure(reason=self.reason)
