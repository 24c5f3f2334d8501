from collections.abc import Iterable
from functools import singledispatch
from itertools import islice
from threading import get_ident
from typing import Any, Callable, Optional

from typing_extensions import TypedDict, Unpack

SURPASSED_PRINT_LENGTH = "..."

PRINT_LENGTH: Optional[int] = None
PRINT_SEPARATOR = ", "

# (id, thread) of every TextObject currently being rendered
_rendering: set[tuple[int, int]] = set()


class PrintSettings(TypedDict, total=False):
    print_length: Optional[int]


class TextObject:
    """Mixin for objects which would like to customize their ``__str__``
    representation using the settings accepted by :py:func:`text`."""

    __slots__ = ()

    # Rendered in place of an object which contains itself
    recursive_text = SURPASSED_PRINT_LENGTH

    def __str__(self):
        return self.text()

    def _text(self, **kwargs: Unpack[PrintSettings]) -> str:
        """Private text representation method. Callers should use the module
        function :py:func:`text` instead."""
        raise NotImplementedError()

    def text(self, **kwargs: Unpack[PrintSettings]) -> str:
        return text(self, **kwargs)


def kv_text(
    entries: Callable[[], Iterable[tuple[Any, Any]]],
    start: str,
    end: str,
    **kwargs: Unpack[PrintSettings],
) -> str:
    """Produce a text representation of key/value pairs, bookended with the start
    and end string supplied. The entries argument must be a callable which will
    produce tuples of key-value pairs.

    If ``print_length`` is an integer, at most that many pairs are rendered and
    the remainder is elided with ``...``.

    Empty collections render as just the bookends, so ``"{ "`` and ``" }"``
    produce ``"{  }"``."""
    print_length = kwargs.get("print_length", PRINT_LENGTH)

    def entry_texts():
        for k, v in entries():
            yield f"{text(k, **kwargs)}: {text(v, **kwargs)}"

    trailer = []
    if isinstance(print_length, int):
        items = list(islice(entry_texts(), print_length + 1))
        if len(items) > print_length:
            items.pop()
            trailer.append(SURPASSED_PRINT_LENGTH)
    else:
        items = list(entry_texts())

    return f"{start}{PRINT_SEPARATOR.join(items + trailer)}{end}"


# pylint: disable=unused-argument
@singledispatch
def text(o: Any, print_length: Optional[int] = PRINT_LENGTH) -> str:
    """Return the natural text form of a key or value.

    Permissible keyword arguments are:
    - print_length: the number of pairs of a nested associative array which
                    will be printed, or no limit if ``None`` (default: None)"""
    return str(o)


@text.register(TextObject)
def _text_obj(o: TextObject, print_length: Optional[int] = PRINT_LENGTH) -> str:
    key = (id(o), get_ident())
    if key in _rendering:
        return o.recursive_text
    _rendering.add(key)
    try:
        return o._text(print_length=print_length)
    finally:
        _rendering.discard(key)
