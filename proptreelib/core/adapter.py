"""ValueAdapter abstraction for PropTreeLib.

The adapter is the reflection layer of the library. It knows how to classify
an arbitrary value into a NodeKind and how to enumerate the members of a
container, decoupling the builder from the details of Python's object model.

Reads never raise: every member is reported as a MemberRead carrying either
the resolved value or the exception raised while resolving it.
"""

import inspect
import numbers
from abc import ABC, abstractmethod
from collections.abc import Mapping, Sequence, Set
from dataclasses import dataclass
from enum import Enum
from typing import Any, Iterator, List, Optional

from .node import NodeKind, UNDEFINED


# Largest integer a float represents exactly; anything above is a bigint.
MAX_SAFE_INTEGER = 2 ** 53 - 1


@dataclass(frozen=True)
class MemberRead:
    """Result of reading one member of a container.

    Attributes:
        label: Display name of the member (key or ``[index]``)
        value: Resolved value when the read succeeded
        error: Exception raised while reading, or None
    """

    label: str
    value: Any = None
    error: Optional[BaseException] = None

    @property
    def ok(self) -> bool:
        return self.error is None


class ValueAdapter(ABC):
    """Abstract adapter for inspecting values of a specific object model.

    Subclasses declare how values are classified and how list-like and
    composite containers expose their members. The builder only talks to
    this interface, so alternative object models (ORM rows, proxies,
    foreign objects) can be inspected by supplying a different adapter.
    """

    @abstractmethod
    def classify(self, value: Any) -> NodeKind:
        """Return the NodeKind of a value.

        Must be total: values that cannot be classified map to
        ``NodeKind.ERROR`` rather than raising.
        """
        pass

    @abstractmethod
    def iter_items(self, container: Any) -> Iterator[MemberRead]:
        """Yield the elements of a list-like container in index order.

        Labels are ``[0]``, ``[1]``, ...
        """
        pass

    @abstractmethod
    def iter_properties(self, container: Any) -> Iterator[MemberRead]:
        """Yield the own, enumerable members of a composite container."""
        pass

    def identity(self, value: Any) -> int:
        """Return the identity used for cycle detection."""
        return id(value)


class PythonValueAdapter(ValueAdapter):
    """Adapter for plain Python values.

    Composites are mappings, named tuples and ordinary objects. For objects
    the members are the instance ``__dict__``, then ``__slots__`` and then
    properties, walking the MRO from the base class down.
    """

    def __init__(self, include_private: bool = False, include_properties: bool = True):
        """Initialize the adapter.

        Args:
            include_private: Also enumerate names starting with an underscore
            include_properties: Resolve ``property`` descriptors as members
        """
        self.include_private = include_private
        self.include_properties = include_properties

    def classify(self, value: Any) -> NodeKind:
        try:
            return self._classify(value)
        except Exception:
            return NodeKind.ERROR

    def _classify(self, value: Any) -> NodeKind:
        if value is None:
            return NodeKind.NULL
        if value is UNDEFINED:
            return NodeKind.UNDEFINED
        # Enum before bool/int: IntEnum and IntFlag members are ints too
        if isinstance(value, Enum):
            return NodeKind.SYMBOL
        # bool before int: bool subclasses int
        if isinstance(value, bool):
            return NodeKind.BOOLEAN
        if isinstance(value, int):
            if abs(value) > MAX_SAFE_INTEGER:
                return NodeKind.BIGINT
            return NodeKind.NUMBER
        if isinstance(value, numbers.Number):
            return NodeKind.NUMBER
        if isinstance(value, (str, bytes, bytearray)):
            return NodeKind.STRING
        if _is_namedtuple(value):
            return NodeKind.OBJECT
        if isinstance(value, (Sequence, Set)):
            return NodeKind.ARRAY
        if isinstance(value, Mapping):
            return NodeKind.OBJECT
        if callable(value):
            return NodeKind.FUNCTION
        return NodeKind.OBJECT

    def iter_items(self, container: Any) -> Iterator[MemberRead]:
        if isinstance(container, Sequence):
            for index in range(len(container)):
                label = f"[{index}]"
                try:
                    yield MemberRead(label, container[index])
                except Exception as error:
                    yield MemberRead(label, error=error)
        else:
            # Sets carry no index; use iteration order
            for index, item in enumerate(container):
                yield MemberRead(f"[{index}]", item)

    def iter_properties(self, container: Any) -> Iterator[MemberRead]:
        if _is_namedtuple(container):
            for name in container._fields:
                if self._is_visible(name):
                    yield self._read_attribute(container, name)
        elif isinstance(container, Mapping):
            # Keys are data, not attributes: never filtered
            for key in list(container.keys()):
                label = str(key)
                try:
                    yield MemberRead(label, container[key])
                except Exception as error:
                    yield MemberRead(label, error=error)
        else:
            for name in self._attribute_names(container):
                yield self._read_attribute(container, name)

    def _is_visible(self, name: str) -> bool:
        return self.include_private or not name.startswith("_")

    def _attribute_names(self, obj: Any) -> List[str]:
        """Collect member names: instance dict, then slots, then properties."""
        names: List[str] = []
        seen = set()

        def add(name: str) -> None:
            if name not in seen and self._is_visible(name):
                seen.add(name)
                names.append(name)

        instance_dict = getattr(obj, "__dict__", None)
        if isinstance(instance_dict, dict):
            for name in list(instance_dict):
                if isinstance(name, str):
                    add(name)

        mro = reversed(type(obj).__mro__)
        classes = [klass for klass in mro if klass is not object]
        for klass in classes:
            slots = klass.__dict__.get("__slots__", ())
            if isinstance(slots, str):
                slots = (slots,)
            for name in slots:
                if name not in ("__dict__", "__weakref__"):
                    add(_unmangle(klass, name))

        if self.include_properties:
            for klass in classes:
                for name, attr in klass.__dict__.items():
                    if isinstance(attr, property):
                        add(name)

        return names

    def _read_attribute(self, obj: Any, name: str) -> MemberRead:
        try:
            static = inspect.getattr_static(obj, name)
        except AttributeError:
            static = None
        if isinstance(static, property) and static.fget is None:
            # Setter-only property: the member exists but has nothing to read
            return MemberRead(name, UNDEFINED)
        try:
            return MemberRead(name, getattr(obj, name))
        except AttributeError as error:
            if _is_slot(static):
                # Declared slot that was never assigned
                return MemberRead(name, UNDEFINED)
            return MemberRead(name, error=error)
        except Exception as error:
            return MemberRead(name, error=error)


def _is_namedtuple(value: Any) -> bool:
    return isinstance(value, tuple) and hasattr(type(value), "_fields")


def _is_slot(attr: Any) -> bool:
    return inspect.ismemberdescriptor(attr)


def _unmangle(klass: type, name: str) -> str:
    """Apply private name mangling to a slot name declared as ``__name``."""
    if name.startswith("__") and not name.endswith("__"):
        return f"_{klass.__name__.lstrip('_')}{name}"
    return name
