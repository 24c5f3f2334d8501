from typing import Any, Optional

import attr

from assocarray.obj import text


class AssociativeArrayError(Exception):
    """Base class for errors raised by associative array operations."""


@attr.define(repr=False, str=False)
class NullKeyError(AssociativeArrayError, ValueError):
    """Raised when an operation which stores a key is given ``None``."""

    message: str = "Associative array keys may not be None"

    def __repr__(self):
        return f"assocarray.exception.NullKeyError({self.message!r})"

    def __str__(self):
        return self.message


@attr.define(repr=False, str=False)
class KeyNotFoundError(AssociativeArrayError, KeyError):
    """Raised when a lookup is given ``None`` or a key which does not appear in the
    associative array."""

    key: Optional[Any] = None

    def __repr__(self):
        return f"assocarray.exception.KeyNotFoundError({self.key!r})"

    def __str__(self):
        return f"Key not found: {text(self.key)}"
