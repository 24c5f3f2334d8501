import logging
from collections.abc import Iterable, Iterator, Mapping
from typing import Optional, TypeVar, Union

from typing_extensions import Unpack

from assocarray.exception import KeyNotFoundError, NullKeyError
from assocarray.interfaces import IAssociativeArray
from assocarray.logconfig import TRACE
from assocarray.obj import PrintSettings, TextObject, kv_text
from assocarray.pair import KVPair

K = TypeVar("K")
V = TypeVar("V")

logger = logging.getLogger(__name__)

DEFAULT_CAPACITY = 16

_NOT_FOUND = object()


class AssociativeArray(TextObject, IAssociativeArray[K, V]):
    """Associative array backed by a fixed-length list of key/value pairs.

    Live pairs occupy ``pairs[0:size]`` in insertion order and every slot past
    that is ``None``. Lookups, insertions and removals scan the live pairs
    linearly, comparing keys with ``==``, so keys need not be hashable. When the
    backing store is full, the next insertion doubles its length first.

    ``get`` and ``find`` raise :py:class:`KeyNotFoundError` for ``None`` or
    missing keys and ``set`` raises :py:class:`NullKeyError` for ``None`` keys.
    ``has_key`` and ``remove`` never raise."""

    __slots__ = ("_pairs", "_size")

    recursive_text = "{...}"

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        if isinstance(capacity, bool) or not isinstance(capacity, int):
            raise ValueError(f"Capacity must be an integer, not {type(capacity)}")
        if capacity < 1:
            raise ValueError(f"Capacity must be positive, not {capacity}")
        self._pairs: list[Optional[KVPair[K, V]]] = [None] * capacity
        self._size = 0

    @classmethod
    def from_coll(
        cls, members: Union[Mapping[K, V], Iterable[tuple[K, V]]]
    ) -> "AssociativeArray[K, V]":
        arr: AssociativeArray[K, V] = cls()
        items = members.items() if isinstance(members, Mapping) else members
        for k, v in items:
            arr.set(k, v)
        return arr

    def __bool__(self):
        return self._size > 0

    def __contains__(self, item):
        return self.has_key(item)

    def __copy__(self):
        return self.clone()

    def __delitem__(self, key):
        del self._pairs[self.find(key)]
        self._pairs.append(None)
        self._size -= 1

    def __eq__(self, other):
        if self is other:
            return True
        if not isinstance(other, Mapping):
            return NotImplemented
        if len(self) != len(other):
            return False
        for pair in self._live():
            try:
                if other[pair.key] != pair.value:
                    return False
            except (KeyError, TypeError):
                return False
        return True

    __hash__ = None  # type: ignore[assignment]

    def __getitem__(self, key):
        return self.get(key)

    def __iter__(self) -> Iterator[K]:
        for pair in self._live():
            yield pair.key

    def __len__(self):
        return self._size

    def __repr__(self):
        return f"assocarray.AssociativeArray({self.text()})"

    def __setitem__(self, key, value):
        self.set(key, value)

    def __getstate__(self):
        return {"pairs": [(p.key, p.value) for p in self._live()]}

    def __setstate__(self, state):
        self._pairs = [None] * DEFAULT_CAPACITY
        self._size = 0
        for k, v in state["pairs"]:
            self.set(k, v)

    def _live(self) -> Iterator[KVPair[K, V]]:
        for i in range(self._size):
            yield self._pairs[i]  # type: ignore[misc]

    def _index_of(self, key: Optional[K]) -> int:
        if key is None:
            return -1
        for i, pair in enumerate(self._live()):
            if pair.key == key:
                return i
        return -1

    def _text(self, **kwargs: Unpack[PrintSettings]) -> str:
        return kv_text(
            lambda: ((p.key, p.value) for p in self._live()),
            start="{ ",
            end=" }",
            **kwargs,
        )

    @property
    def capacity(self) -> int:
        return len(self._pairs)

    def set(self, key: K, value: V) -> None:
        """Set the value associated with key to value. Future calls to
        ``get(key)`` will return value."""
        if key is None:
            raise NullKeyError()
        i = self._index_of(key)
        if i >= 0:
            self._pairs[i].value = value  # type: ignore[union-attr]
            return
        if self._size == len(self._pairs):
            self.expand()
        self._pairs[self._size] = KVPair(key, value)
        self._size += 1

    def set_many(self, *kvs) -> None:
        """Set each alternating key and value in order."""
        if len(kvs) % 2 != 0:
            raise ValueError("set_many requires an even number of arguments")
        pairs = list(zip(kvs[::2], kvs[1::2]))
        if any(k is None for k, _ in pairs):
            raise NullKeyError()
        for k, v in pairs:
            self.set(k, v)

    def get(self, key: K, default=_NOT_FOUND):  # type: ignore[override]
        """Get the value associated with key.

        Raise :py:class:`KeyNotFoundError` when the key is ``None`` or does not
        appear in the associative array, unless a default is given, in which
        case return the default instead."""
        i = self._index_of(key)
        if i >= 0:
            return self._pairs[i].value  # type: ignore[union-attr]
        if default is _NOT_FOUND:
            raise KeyNotFoundError(key)
        return default

    def val_at(self, k: Optional[K], default: Optional[V] = None) -> Optional[V]:
        i = self._index_of(k)
        if i < 0:
            return default
        return self._pairs[i].value  # type: ignore[union-attr]

    def entry(self, key: Optional[K]) -> Optional[KVPair[K, V]]:
        i = self._index_of(key)
        if i < 0:
            return None
        return self._pairs[i].copy()  # type: ignore[union-attr]

    def has_key(self, key: Optional[K]) -> bool:
        return self._index_of(key) >= 0

    def remove(self, key: Optional[K]) -> None:
        """Remove the key/value pair associated with key, shifting every later
        pair one slot earlier. Does nothing if key does not appear in the
        associative array."""
        i = self._index_of(key)
        if i < 0:
            return
        for j in range(i, self._size - 1):
            self._pairs[j] = self._pairs[j + 1]
        self._pairs[self._size - 1] = None
        self._size -= 1

    def size(self) -> int:
        return self._size

    def find(self, key: K) -> int:
        """Return the index of the pair in the backing store whose key equals
        key.

        Raise :py:class:`KeyNotFoundError` when the key is ``None`` or does not
        appear in the associative array."""
        i = self._index_of(key)
        if i < 0:
            raise KeyNotFoundError(key)
        return i

    def expand(self) -> None:
        """Double the length of the backing store, keeping every slot in place."""
        old = len(self._pairs)
        self._pairs = self._pairs + [None] * old
        logger.debug(f"Expanded associative array capacity from {old} to {old * 2}")

    def clone(self) -> "AssociativeArray[K, V]":
        """Return an independent copy of this associative array holding new pairs
        with the same keys and values in the same order.

        The copy starts from the default capacity rather than this array's
        capacity and doubles as needed to hold every pair."""
        arr: AssociativeArray[K, V] = AssociativeArray()
        while arr.capacity < self._size:
            arr.expand()
        for i, pair in enumerate(self._live()):
            arr._pairs[i] = pair.copy()
        arr._size = self._size
        logger.log(TRACE, f"Cloned associative array with {self._size} pairs")
        return arr

    def copy(self) -> "AssociativeArray[K, V]":
        return self.clone()


def associative_array(kvs: Mapping[K, V]) -> AssociativeArray[K, V]:
    """Creates a new associative array."""
    return AssociativeArray.from_coll(kvs.items())


def a(**kvs: V) -> AssociativeArray[str, V]:
    """Creates a new associative array from keyword arguments."""
    return AssociativeArray.from_coll(kvs)
