from abc import ABC, abstractmethod
from collections.abc import MutableMapping, Sized
from typing import Generic, Optional, TypeVar

K = TypeVar("K")
V = TypeVar("V")


class ICounted(Sized, ABC):
    """``ICounted`` is a marker interface for types which can produce their length
    in constant time."""

    __slots__ = ()


class IKVPair(Generic[K, V], ABC):
    """``IKVPair`` values are the slots stored in an associative array's backing
    store.

    .. seealso::

       :py:meth:`IAssociativeArray.entry`"""

    __slots__ = ()

    @property
    @abstractmethod
    def key(self) -> K:
        raise NotImplementedError()

    @property
    @abstractmethod
    def value(self) -> V:
        raise NotImplementedError()


class ILookup(Generic[K, V], ABC):
    """``ILookup`` types allow accessing contained values by a key without raising
    for missing keys."""

    __slots__ = ()

    @abstractmethod
    def val_at(self, k: K, default: Optional[V] = None) -> Optional[V]:
        raise NotImplementedError()


class IAssociativeArray(ILookup[K, V], ICounted, MutableMapping[K, V]):
    """``IAssociativeArray`` types map unique keys to values.

    Lookups and insertions are strict: they raise for ``None`` keys and (for
    lookups) for missing keys. Existence checks and removals are permissive and
    never raise.

    .. seealso::

       :py:class:`assocarray.array.AssociativeArray`"""

    __slots__ = ()

    @abstractmethod
    def set(self, key: K, value: V) -> None:
        raise NotImplementedError()

    @abstractmethod
    def has_key(self, key: Optional[K]) -> bool:
        raise NotImplementedError()

    @abstractmethod
    def remove(self, key: Optional[K]) -> None:
        raise NotImplementedError()

    @abstractmethod
    def size(self) -> int:
        raise NotImplementedError()

    @abstractmethod
    def find(self, key: K) -> int:
        raise NotImplementedError()

    @abstractmethod
    def entry(self, key: Optional[K]) -> Optional[IKVPair[K, V]]:
        raise NotImplementedError()

    @abstractmethod
    def clone(self) -> "IAssociativeArray[K, V]":
        raise NotImplementedError()
