"""Error codes and the error type raised by the language server."""

from __future__ import annotations

from enum import IntEnum
from typing import Any


class LspErrorCode(IntEnum):
    """Error codes reported by the language server."""

    # Errors passed through from the JSON-RPC layer
    PARSE_ERROR = 0
    INVALID_REQUEST = 1
    METHOD_NOT_FOUND = 2
    INVALID_PARAMS = 3
    INTERNAL_ERROR = 4
    SERVER_ERROR = 5
    TRANSPORT_ERROR = 6
    TIMEOUT_ERROR = 7
    CLIENT_ERROR = 8

    # Language-server errors
    METHOD_NOT_IMPLEMENTED = 9
    DOCUMENT_NOT_OPEN = 10
    DOCUMENT_NOT_FOUND = 11

    UNKNOWN_ERROR = 12


_DEFAULT_MESSAGES = {
    LspErrorCode.PARSE_ERROR: "Parse error",
    LspErrorCode.INVALID_REQUEST: "Invalid request",
    LspErrorCode.METHOD_NOT_FOUND: "Method not found",
    LspErrorCode.INVALID_PARAMS: "Invalid params",
    LspErrorCode.INTERNAL_ERROR: "Internal error",
    LspErrorCode.SERVER_ERROR: "Server error",
    LspErrorCode.TRANSPORT_ERROR: "Transport error",
    LspErrorCode.TIMEOUT_ERROR: "Timeout error",
    LspErrorCode.CLIENT_ERROR: "Client error",
    LspErrorCode.METHOD_NOT_IMPLEMENTED: "Method not implemented",
    LspErrorCode.DOCUMENT_NOT_OPEN: "Document not open",
    LspErrorCode.DOCUMENT_NOT_FOUND: "Document not found",
    LspErrorCode.UNKNOWN_ERROR: "Unknown error",
}


def default_message(code: LspErrorCode | int) -> str:
    """Return the standard message for an error code."""
    return _DEFAULT_MESSAGES[LspErrorCode(code)]


class LspError(Exception):
    """An error carrying an LSP error code and a message."""

    def __init__(self, code: LspErrorCode | int, message: str) -> None:
        super().__init__(message)
        self.code = LspErrorCode(code)
        self.message = message

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.code!r}, {self.message!r})"

    def to_json(self) -> dict[str, Any]:
        """Return the JSON form of the error."""
        return {"code": int(self.code), "message": self.message}

    @classmethod
    def from_code(cls, code: LspErrorCode | int, message: str = "") -> LspError:
        """Build an error, using the default message when none is given."""
        return cls(code, message or default_message(code))