from __future__ import annotations

from enum import StrEnum


class ErrorCode(StrEnum):
    STRUCTURAL_PARSE_ERROR = "STRUCTURAL_PARSE_ERROR"
    IDENTIFIER_RESOLUTION_FAILED = "IDENTIFIER_RESOLUTION_FAILED"
    UPSTREAM_API_ERROR = "UPSTREAM_API_ERROR"
    FETCH_FAILED = "FETCH_FAILED"
    INVALID_INPUT = "INVALID_INPUT"


class FictionZoneError(Exception):
    """Base class for every expected extraction failure.

    Caught by server.py and serialised into the MCP error response.
    Extractors log and re-raise; nothing below the server recovers from it.
    """

    def __init__(
        self,
        code: ErrorCode,
        message: str,
        suggestion: str,
        recoverable: bool = False,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.message = message
        self.suggestion = suggestion
        self.recoverable = recoverable

    def to_dict(self) -> dict:
        return {
            "error": {
                "code": self.code,
                "message": self.message,
                "suggestion": self.suggestion,
                "recoverable": self.recoverable,
            }
        }


class StructuralParseError(FictionZoneError):
    """A required element (title, hydration payload) is missing from a page."""

    def __init__(self, message: str) -> None:
        super().__init__(
            code=ErrorCode.STRUCTURAL_PARSE_ERROR,
            message=message,
            suggestion="The page layout is unrecognised or the novel does not exist.",
            recoverable=False,
        )


class IdentifierResolutionError(FictionZoneError):
    """The detail page parsed, but no novel identifier could be recovered."""

    def __init__(self, novel_path: str) -> None:
        super().__init__(
            code=ErrorCode.IDENTIFIER_RESOLUTION_FAILED,
            message=f"Failed to retrieve novel ID for {novel_path}",
            suggestion="Paginated chapters are unavailable for this novel; use parse_novel.",
            recoverable=False,
        )
        self.novel_path = novel_path


class UpstreamApiError(FictionZoneError):
    """The chapter API answered with a non-success status."""

    def __init__(self, status_code: int) -> None:
        super().__init__(
            code=ErrorCode.UPSTREAM_API_ERROR,
            message=f"API error: {status_code}",
            suggestion="The chapter API may be temporarily unavailable. Try again later.",
            recoverable=status_code >= 500,
        )
        self.status_code = status_code


class FetchError(FictionZoneError):
    """Network-level failure raised by the HTTP fetcher."""

    def __init__(self, message: str) -> None:
        super().__init__(
            code=ErrorCode.FETCH_FAILED,
            message=message,
            suggestion=(
                "fictionzone.net could not be reached. Failed pages stay cached "
                "for the session, so restart the server before retrying."
            ),
            recoverable=False,
        )


class InvalidInputError(FictionZoneError):
    def __init__(self, message: str, suggestion: str) -> None:
        super().__init__(
            code=ErrorCode.INVALID_INPUT,
            message=message,
            suggestion=suggestion,
            recoverable=False,
        )
