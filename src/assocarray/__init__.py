from assocarray import logconfig
from assocarray.array import DEFAULT_CAPACITY, AssociativeArray, a, associative_array
from assocarray.exception import (
    AssociativeArrayError,
    KeyNotFoundError,
    NullKeyError,
)
from assocarray.pair import KVPair

logconfig.install_null_handler()

__all__ = [
    "DEFAULT_CAPACITY",
    "AssociativeArray",
    "AssociativeArrayError",
    "KVPair",
    "KeyNotFoundError",
    "NullKeyError",
    "a",
    "associative_array",
]
