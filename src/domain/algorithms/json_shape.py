from __future__ import annotations

from typing import Any


def as_sequence(value: Any) -> tuple[Any, ...]:
    """Normalize an "object or array" JSON field into a tuple.

    The upstream API returns a bare object instead of a one-element array when
    a collection has a single member, and omits the field when it is empty.
    """

    if value is None:
        return ()
    if isinstance(value, (list, tuple)):
        return tuple(value)
    return (value,)
