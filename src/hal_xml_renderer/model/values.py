"""Tagged value model for HAL resources.

Every property, link attribute and resource is one of three explicitly tagged
shapes: :class:`Scalar`, :class:`ListValue` or :class:`MapValue`. Whether a
container is a list or a map is decided when it is constructed, never by
inspecting its keys afterwards.
"""

from dataclasses import dataclass
from typing import Any, Iterator, Mapping, Optional, Tuple, Union

from hal_xml_renderer.shared.errors import InvalidValueError

ScalarType = Union[str, int, float, bool, None]

_SCALAR_TYPES = (str, int, float, bool)

# Reserved resource sections
LINKS_KEY = "_links"
EMBEDDED_KEY = "_embedded"
RESERVED_KEYS = (LINKS_KEY, EMBEDDED_KEY)


def is_scalar_type(value: Any) -> bool:
    """Check if a raw Python value can be held by a Scalar."""
    return value is None or isinstance(value, _SCALAR_TYPES)


@dataclass(frozen=True)
class Scalar:
    """A leaf value: string, number, boolean or null."""

    value: ScalarType = None

    def __post_init__(self) -> None:
        """Validate scalar payload."""
        if not is_scalar_type(self.value):
            raise ValueError(
                f"Scalar cannot hold a {type(self.value).__name__}"
            )

    def to_python(self) -> ScalarType:
        return self.value


@dataclass(frozen=True)
class ListValue:
    """An ordered sequence of values.

    Items must already be :class:`Scalar`, :class:`ListValue` or
    :class:`MapValue`; use :func:`to_value` to convert plain data.
    """

    items: Tuple[Any, ...] = ()

    def __post_init__(self) -> None:
        """Freeze the item sequence."""
        if not isinstance(self.items, tuple):
            object.__setattr__(self, "items", tuple(self.items))

    def __iter__(self) -> Iterator[Any]:
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)

    def __getitem__(self, index: int) -> Any:
        return self.items[index]

    def to_python(self) -> list:
        return [_to_python(item) for item in self.items]


@dataclass(frozen=True)
class MapValue:
    """An ordered mapping of unique string keys to values.

    Accepts either a mapping or an iterable of ``(key, value)`` pairs; the
    declared order is preserved. Values are not converted: they must already
    be :class:`Scalar`, :class:`ListValue` or :class:`MapValue`, and raw Python
    values are only rejected when the map is rendered. Use :func:`to_value` for
    plain data.

    Example:
        >>> link = MapValue({"href": Scalar("/u/1"), "title": Scalar("Alice")})
        >>> list(link.keys())
        ['href', 'title']
    """

    entries: Tuple[Tuple[str, Any], ...] = ()

    def __post_init__(self) -> None:
        """Freeze entries and validate key uniqueness."""
        raw = self.entries
        pairs = tuple(raw.items()) if isinstance(raw, Mapping) else tuple(raw)

        seen = set()
        for pair in pairs:
            if len(pair) != 2:
                raise ValueError("Map entries must be (key, value) pairs")
            key = pair[0]
            if not isinstance(key, str):
                raise ValueError(f"Map key must be a string, got {type(key).__name__}")
            if key in seen:
                raise ValueError(f"Duplicate map key '{key}'")
            seen.add(key)

        object.__setattr__(self, "entries", tuple((k, v) for k, v in pairs))

    def __iter__(self) -> Iterator[str]:
        return self.keys()

    def __len__(self) -> int:
        return len(self.entries)

    def __contains__(self, key: object) -> bool:
        return any(k == key for k, _ in self.entries)

    def keys(self) -> Iterator[str]:
        return (key for key, _ in self.entries)

    def values(self) -> Iterator[Any]:
        return (value for _, value in self.entries)

    def items(self) -> Iterator[Tuple[str, Any]]:
        return iter(self.entries)

    def get(self, key: str, default: Optional[Any] = None) -> Any:
        for k, v in self.entries:
            if k == key:
                return v
        return default

    def items_except(self, *excluded: str) -> Iterator[Tuple[str, Any]]:
        """Iterate entries in declared order, skipping ``excluded`` keys."""
        return ((k, v) for k, v in self.entries if k not in excluded)

    def without(self, *excluded: str) -> "MapValue":
        """Return a new map lacking ``excluded`` keys."""
        return MapValue(tuple(self.items_except(*excluded)))

    def to_python(self) -> dict:
        return {key: _to_python(value) for key, value in self.entries}


Value = Union[Scalar, ListValue, MapValue]

EMPTY_MAP = MapValue()


def is_value(obj: Any) -> bool:
    """Check if ``obj`` is one of the three tagged value shapes."""
    return isinstance(obj, (Scalar, ListValue, MapValue))


def _to_python(value: Any) -> Any:
    if is_value(value):
        return value.to_python()
    return value


class _ConversionFrame:
    """A container whose children are still being converted."""

    def __init__(self, source: Any, key: str) -> None:
        self.source = source
        self.key = key
        self.is_map = isinstance(source, Mapping)
        if self.is_map:
            self.children = iter(source.items())
        else:
            self.children = ((key, item) for item in source)
        self.converted: list = []

    def add(self, child_key: str, value: Value) -> None:
        self.converted.append((child_key, value) if self.is_map else value)

    def finish(self) -> Value:
        if self.is_map:
            return MapValue(tuple(self.converted))
        return ListValue(tuple(self.converted))


def _is_container(obj: Any) -> bool:
    return isinstance(obj, (Mapping, list, tuple))


def _convert_leaf(obj: Any, key: str) -> Value:
    if is_value(obj):
        return obj
    if is_scalar_type(obj):
        return Scalar(obj)
    raise InvalidValueError(key, obj)


def to_value(obj: Any, key: str = "resource") -> Value:
    """Convert plain Python data into the tagged value model.

    Mappings become :class:`MapValue`, lists and tuples become
    :class:`ListValue`, and strings, numbers, booleans and ``None`` become
    :class:`Scalar`. Existing values are returned unchanged.

    Conversion uses an explicit stack, so arbitrarily deep data never hits
    the interpreter's recursion limit; depth is bounded later by the tree
    builder.

    Args:
        obj: Data to convert
        key: Name reported in errors for ``obj`` itself

    Returns:
        The tagged value

    Raises:
        InvalidValueError: If ``obj`` or anything nested in it cannot be
            represented or refers back to one of its own containers, naming
            the key under which it was found
    """
    if not _is_container(obj):
        return _convert_leaf(obj, key)

    stack = [_ConversionFrame(obj, key)]
    # Containers on the current path; a repeat means a cycle
    active = {id(obj)}

    while stack:
        frame = stack[-1]
        pair = next(frame.children, None)

        if pair is None:
            stack.pop()
            active.discard(id(frame.source))
            value = frame.finish()
            if not stack:
                return value
            stack[-1].add(frame.key, value)
            continue

        child_key, child = pair
        if frame.is_map and not isinstance(child_key, str):
            raise InvalidValueError(
                str(child_key), child_key, "map keys must be strings"
            )

        if not _is_container(child):
            frame.add(child_key, _convert_leaf(child, child_key))
            continue

        if id(child) in active:
            raise InvalidValueError(child_key, child, "cyclic reference")
        active.add(id(child))
        stack.append(_ConversionFrame(child, child_key))

    raise AssertionError("unreachable")
