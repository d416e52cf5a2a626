"""
File-based implementation of StoreProtocol.
One file per key under a single directory; file contents are the codec output.
"""

import contextlib
import logging
import os
import tempfile
from pathlib import Path
from typing import Any, Generic, Iterable, List, Optional, Tuple, Union

from .base import Codec, CodecError, V
from .codecs import JsonCodec
from .config import Settings, get_settings
from .errors import StoreCodecError, StoreIOError

logger = logging.getLogger(__name__)


class FileStore(Generic[V]):
    """
    Simple file system key:value store.

    The directory is neither created nor checked here; operations on a
    missing directory fail with StoreIOError. Instances hold no open
    handles and share nothing, so several may point at the same directory.
    """

    def __init__(
        self,
        directory: Union[str, Path],
        value_type: Any = Any,
        codec: Optional[Codec[V]] = None,
        atomic_writes: bool = False,
    ):
        self.directory = Path(directory)
        self.codec: Codec[V] = codec if codec is not None else JsonCodec(value_type)
        self.atomic_writes = atomic_writes

    @classmethod
    def from_settings(
        cls,
        settings: Optional[Settings] = None,
        value_type: Any = Any,
        codec: Optional[Codec[V]] = None,
    ) -> "FileStore[V]":
        """Build a store from FILESTORE_* settings (see config.py)."""
        s = settings or get_settings()
        if codec is None:
            codec = JsonCodec(value_type, indent=s.FILESTORE_JSON_INDENT)
        return cls(s.FILESTORE_DATA_DIR, codec=codec, atomic_writes=s.FILESTORE_ATOMIC_WRITES)

    def __repr__(self) -> str:
        return f"FileStore({str(self.directory)!r}, codec={self.codec!r})"

    def path_for(self, key: str) -> Path:
        return self.directory / key

    # Internal helpers

    def _io_failure(self, action: str, key: Optional[str], e: OSError) -> StoreIOError:
        target = self.path_for(key) if key is not None else self.directory
        logger.warning("FileStore %s failed for %s: %s", action, target, e)
        return StoreIOError(f"Could not {action} {target}: {e}", key=key, error=e)

    def _codec_failure(self, action: str, key: str, e: BaseException) -> StoreCodecError:
        logger.warning("FileStore %s failed for key %r: %s", action, key, e)
        return StoreCodecError(f"Could not {action} value for key {key!r}: {e}", key=key, error=e)

    def _codec_errors(self) -> Tuple[type, ...]:
        return getattr(self.codec, "errors", (CodecError,))

    def _read(self, key: str) -> V:
        try:
            data = self.path_for(key).read_bytes()
        except OSError as e:
            raise self._io_failure("read", key, e) from e
        try:
            return self.codec.decode(data)
        except self._codec_errors() as e:
            raise self._codec_failure("decode", key, e) from e

    def _write(self, path: Path, data: bytes) -> None:
        if not self.atomic_writes:
            path.write_bytes(data)
            return
        # O_EXCL; the staging name never clobbers an existing key
        fd, tmp = tempfile.mkstemp(dir=path.parent, prefix=".", suffix=".tmp")
        try:
            with os.fdopen(fd, "wb") as f:
                f.write(data)
            os.replace(tmp, path)
        except OSError:
            with contextlib.suppress(OSError):
                os.unlink(tmp)
            raise

    # Operations

    def list(self) -> List[str]:
        """List all keys (file names) in the directory. Order is filesystem-dependent."""
        try:
            names = [p.name for p in self.directory.iterdir()]
        except OSError as e:
            raise self._io_failure("list", None, e) from e
        logger.debug("FileStore list %s: %d entries", self.directory, len(names))
        return names

    def load(self, key: str) -> V:
        """Load the value stored under key."""
        logger.debug("FileStore load %r", key)
        return self._read(key)

    def store(self, key: str, value: V) -> None:
        """Store value under key, creating or overwriting its file. Encoding happens before any write."""
        try:
            data = self.codec.encode(value)
        except self._codec_errors() as e:
            raise self._codec_failure("encode", key, e) from e
        try:
            self._write(self.path_for(key), data)
        except OSError as e:
            raise self._io_failure("write", key, e) from e
        logger.debug("FileStore store %r (%d bytes)", key, len(data))

    def load_all(self) -> List[Tuple[str, V]]:
        """
        Load every entry as (key, value) pairs.
        Stops at the first unreadable or undecodable entry; no partial result is returned.
        """
        return [(name, self._read(name)) for name in self.list()]

    def store_all(self, items: Iterable[Tuple[str, V]]) -> None:
        """Store each (key, value) in order. Stops at the first failure; earlier writes are kept."""
        for key, value in items:
            self.store(key, value)

    def rm(self, key: str) -> None:
        """Remove the file for key. Missing keys raise StoreIOError."""
        try:
            self.path_for(key).unlink()
        except OSError as e:
            raise self._io_failure("remove", key, e) from e
        logger.debug("FileStore rm %r", key)

    def exists(self, key: str) -> bool:
        return self.path_for(key).is_file()
