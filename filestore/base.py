"""
Abstract interfaces: the value codec and the store surface.
Concrete implementations live in codecs.py and file_store.py.
"""

from abc import ABC, abstractmethod
from typing import Generic, Iterable, List, Protocol, Tuple, TypeVar, runtime_checkable

V = TypeVar("V")


class CodecError(Exception):
    """Raised by custom codecs when a value cannot be encoded or decoded."""


class Codec(ABC, Generic[V]):
    """
    Converts values to and from bytes.

    Subclasses implement encode/decode and list the exception types they raise
    in `errors`; FileStore reports exactly those as codec failures. Duck-typed
    codecs without an `errors` attribute are treated as raising CodecError.
    """

    errors: Tuple[type, ...] = (CodecError,)

    @abstractmethod
    def encode(self, value: V) -> bytes: ...

    @abstractmethod
    def decode(self, data: bytes) -> V: ...


@runtime_checkable
class StoreProtocol(Protocol[V]):
    """Key/value persistence surface implemented by FileStore."""

    def list(self) -> List[str]: ...

    def load(self, key: str) -> V: ...

    def store(self, key: str, value: V) -> None: ...

    def load_all(self) -> List[Tuple[str, V]]: ...

    def store_all(self, items: Iterable[Tuple[str, V]]) -> None: ...

    def rm(self, key: str) -> None: ...
