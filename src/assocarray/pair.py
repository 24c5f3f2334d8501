from typing import TypeVar

import attr

from assocarray.interfaces import IKVPair

K = TypeVar("K")
V = TypeVar("V")


@attr.define
class KVPair(IKVPair[K, V]):
    """A single key/value slot in an associative array's backing store. The
    value is overwritten in place when an existing key is set again."""

    key: K
    value: V

    def copy(self) -> "KVPair[K, V]":
        return KVPair(self.key, self.value)
