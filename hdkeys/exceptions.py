"""HD key derivation exceptions hierarchy."""

from typing import Any, Optional

__all__ = [
    "HDKeyError",
    "ValidationError",
    "InvalidSeedLengthError",
    "InvalidPathError",
    "CryptoError",
    "InvalidChildError",
]


class HDKeyError(Exception):
    """Base exception for all HD key derivation errors."""

    def __init__(
        self,
        message: str,
        code: Optional[int] = None,
        data: Optional[Any] = None
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code
        self.data = data

    def __str__(self) -> str:
        if self.code:
            return f"[{self.code}] {self.message}"
        return self.message


class ValidationError(HDKeyError):
    """Raised when an input value fails validation."""
    pass


class InvalidSeedLengthError(ValidationError):
    """Raised when a root seed is outside the accepted length range."""

    def __init__(self, length: int, message: Optional[str] = None) -> None:
        if message is None:
            message = f"Invalid seed length: {length} bytes"
        super().__init__(message, data=length)
        self.length = length


class InvalidPathError(ValidationError):
    """Raised when a derivation path cannot be parsed."""

    def __init__(self, path: str, message: Optional[str] = None) -> None:
        if message is None:
            message = f"Invalid derivation path: {path!r}"
        super().__init__(message, data=path)
        self.path = path


class CryptoError(HDKeyError):
    """Raised when a cryptographic operation fails."""
    pass


class InvalidChildError(CryptoError):
    """
    Raised when the extended key at a child index is invalid.

    Happens when the left half of the HMAC output is zero or not below the
    curve order. Callers conventionally move on to ``index + 1``.
    """

    def __init__(self, index: int, message: Optional[str] = None) -> None:
        if message is None:
            message = f"The extended key at index {index:#010x} is invalid"
        super().__init__(message, data=index)
        self.index = index
