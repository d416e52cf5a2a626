"""Exceptions raised by FileStore operations."""

from typing import Optional


class StoreError(Exception):
    """Base for store failures with a machine-readable code."""
    def __init__(
        self,
        message: str,
        code: str = "store_error",
        key: Optional[str] = None,
        error: Optional[BaseException] = None,
    ):
        self.message = message
        self.code = code
        self.key = key
        self.error = error
        super().__init__(message)


class StoreIOError(StoreError):
    """A filesystem call (read, write, enumerate, remove) failed. `error` is the OSError."""
    def __init__(self, message: str, key: Optional[str] = None, error: Optional[OSError] = None):
        super().__init__(message, code="io_error", key=key, error=error)


class StoreCodecError(StoreError):
    """The codec could not encode or decode a value. `error` is the codec's own exception."""
    def __init__(self, message: str, key: Optional[str] = None, error: Optional[BaseException] = None):
        super().__init__(message, code="codec_error", key=key, error=error)
