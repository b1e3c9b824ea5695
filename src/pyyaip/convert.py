# -*- encoding: utf-8 -*-
# @File   : convert.py
# @Time   : 2024/10/12 21:40:08
# @Author : Kariko Lin

"""Value <-> text conversion for the typed INI accessors.

INI values are always stored as text. Anything else has to go through
`to_string()` on the way in and `from_string()` on the way out.
Supported out of the box: `bool`, `int`, `float`, `str`.
(A "char" is simply a `str` of length one here.)

Extra types could be plugged in with `register_converter()`, e.g.

    ```python
    register_converter(Path, str, Path)
    doc.set_value('Paths', 'Root', Path('/tmp'))
    doc.get_value('Paths', 'Root', Path('.'))  # -> PosixPath('/tmp')
    ```
"""

from typing import Any, Callable, NamedTuple, TypeVar

__all__ = [
    'ConversionError', 'Converter',
    'register_converter', 'to_string', 'from_string'
]

STRING_TRUE = 'true'
STRING_FALSE = 'false'

_TRUTHY = frozenset((STRING_TRUE, '1', 'yes', 'on', 'y', 't'))
_FALSY = frozenset((STRING_FALSE, '0', 'no', 'off', 'n', 'f'))


class ConversionError(ValueError):
    """A value could not be converted from or to its INI text form."""
    pass


class Converter(NamedTuple):
    to_str: Callable[[Any], str]
    from_str: Callable[[str], Any]


def _bool_from_str(raw: str) -> bool:
    lowered = raw.strip().lower()
    if lowered in _TRUTHY:
        return True
    if lowered in _FALSY:
        return False
    raise ValueError(f'not a boolean literal: {raw!r}')


_REGISTRY: dict[type, Converter] = {
    bool: Converter(lambda v: STRING_TRUE if v else STRING_FALSE,
                    _bool_from_str),
    int: Converter(str, lambda s: int(s.strip())),
    float: Converter(repr, lambda s: float(s.strip())),
    str: Converter(str, str),
}


def register_converter(
    type_: type,
    to_str: Callable[[Any], str],
    from_str: Callable[[str], Any]
) -> None:
    """Add (or replace) the conversion pair used for `type_`."""
    _REGISTRY[type_] = Converter(to_str, from_str)


def _lookup(type_: type) -> Converter:
    # walk the MRO, so `bool` never falls into `int`, but subclasses work.
    for base in type_.__mro__:
        if base in _REGISTRY:
            return _REGISTRY[base]
    raise ConversionError(f'no converter registered for {type_.__name__}')


def to_string(value: Any) -> str:
    if isinstance(value, str):
        return value
    conv = _lookup(type(value))
    try:
        return conv.to_str(value)
    except (TypeError, ValueError) as e:
        raise ConversionError(
            f'cannot convert {value!r} to INI text: {e}') from e


T = TypeVar('T')


def from_string(raw: str, target: type[T]) -> T:
    if target is str:
        return raw  # type: ignore[return-value]
    conv = _lookup(target)
    try:
        return conv.from_str(raw)
    except (TypeError, ValueError) as e:
        raise ConversionError(
            f'cannot convert {raw!r} to {target.__name__}: {e}') from e
