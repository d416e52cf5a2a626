"""Per-key file-backed storage: one file per key, values encoded by a pluggable codec."""

from .base import Codec, CodecError, StoreProtocol
from .codecs import JsonCodec
from .config import Settings, get_settings
from .errors import StoreCodecError, StoreError, StoreIOError
from .file_store import FileStore

__all__ = [
    "Codec",
    "CodecError",
    "FileStore",
    "JsonCodec",
    "Settings",
    "StoreCodecError",
    "StoreError",
    "StoreIOError",
    "StoreProtocol",
    "get_settings",
]
