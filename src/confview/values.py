"""
Uniform value model.

Every input format is converted into the same closed set of variants:
``Null``, ``Bool``, ``Number``, ``String``, ``Array`` and ``Object``.
The tree is a pure ownership hierarchy built once and read once.
"""

import datetime
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, ClassVar, Dict, List, Union


class ValueKind(Enum):
    """Enumeration of value variants."""
    NULL = "null"
    BOOL = "bool"
    NUMBER = "number"
    STRING = "string"
    ARRAY = "array"
    OBJECT = "object"


@dataclass(frozen=True)
class Null:
    kind: ClassVar[ValueKind] = ValueKind.NULL


@dataclass(frozen=True)
class Bool:
    value: bool
    kind: ClassVar[ValueKind] = ValueKind.BOOL


@dataclass(frozen=True)
class Number:
    """Integer or float exactly as the source format produced it."""
    value: Union[int, float]
    kind: ClassVar[ValueKind] = ValueKind.NUMBER

    def __str__(self) -> str:
        if isinstance(self.value, float):
            return repr(self.value)
        return str(self.value)


@dataclass(frozen=True)
class String:
    value: str
    kind: ClassVar[ValueKind] = ValueKind.STRING


@dataclass
class Array:
    items: List["Value"] = field(default_factory=list)
    kind: ClassVar[ValueKind] = ValueKind.ARRAY

    def __len__(self) -> int:
        return len(self.items)


@dataclass
class Object:
    """Ordered mapping; iteration order is insertion order."""
    entries: Dict[str, "Value"] = field(default_factory=dict)
    kind: ClassVar[ValueKind] = ValueKind.OBJECT

    def __len__(self) -> int:
        return len(self.entries)


Value = Union[Null, Bool, Number, String, Array, Object]

NULL = Null()


def kind_of(value: Value) -> ValueKind:
    """Return the variant tag of a value."""
    return value.kind


def is_container(value: Value) -> bool:
    return isinstance(value, (Array, Object))


def key_to_text(key: Any) -> str:
    """Stringify a mapping key the way it would read in the source file."""
    if key is None:
        return "null"
    if isinstance(key, bool):
        return "true" if key else "false"
    return str(key)


def _scalar(data: Any) -> Value:
    if data is None:
        return NULL
    # bool is a subclass of int
    if isinstance(data, bool):
        return Bool(data)
    if isinstance(data, (int, float)):
        return Number(data)
    if isinstance(data, str):
        return String(data)
    if isinstance(data, (datetime.date, datetime.time)):
        return String(data.isoformat())
    if isinstance(data, bytes):
        return String(data.decode("utf-8", errors="replace"))
    return String(str(data))


def _empty_container(data: Any) -> Value:
    if isinstance(data, dict):
        return Object()
    if isinstance(data, (list, tuple)):
        return Array()
    return _scalar(data)


class CyclicStructureError(ValueError):
    """Raised when a native container contains itself."""


def from_native(data: Any) -> Value:
    """
    Build a Value tree from the native structure a parsing library returns.

    Containers are created before their children and filled from an
    explicit stack, so nesting depth is bounded by memory only. A
    container shared by several parents is copied for each of them; a
    container that appears inside itself is rejected.

    Args:
        data: Result of ``json.loads``, ``tomllib.loads`` or ``yaml.safe_load``

    Returns:
        Equivalent Value tree with source ordering preserved

    Raises:
        CyclicStructureError: If a container is one of its own descendants
    """
    root = _empty_container(data)
    if not is_container(root):
        return root

    # ids of the native containers on the path from the root to the current one
    on_path = set()
    stack = [(data, root)]

    while stack:
        source, target = stack.pop()

        if target is None:
            on_path.discard(id(source))
            continue

        on_path.add(id(source))
        stack.append((source, None))

        if isinstance(target, Object):
            children = [(key_to_text(key), child) for key, child in source.items()]
        else:
            children = [(None, child) for child in source]

        for key, child in children:
            child_value = _empty_container(child)
            if isinstance(target, Array):
                target.items.append(child_value)
            else:
                target.entries[key] = child_value
            if is_container(child_value):
                if id(child) in on_path:
                    raise CyclicStructureError(
                        f"{type(child).__name__} contains itself")
                stack.append((child, child_value))

    return root
