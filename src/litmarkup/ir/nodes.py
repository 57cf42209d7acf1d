from __future__ import annotations

from types import MappingProxyType
from typing import Any, Callable, Mapping, Tuple, Union

import msgspec


class Text(msgspec.Struct, frozen=True, tag="text"):
    """Literal text."""

    value: str


class MarkerRef(msgspec.Struct, frozen=True, tag="marker"):
    """Reference to a substitution value by position."""

    index: int


class TagName(msgspec.Struct, frozen=True, tag="tag"):
    name: str


class ComponentRef(msgspec.Struct, frozen=True, tag="component"):
    """A component callable, resolved once when the template is parsed."""

    name: str
    component: Callable[..., Any]


Part = Union[Text, MarkerRef]

# Attribute values (and split text) collapse to a single part when possible.
AttrIR = Union[Text, MarkerRef, Tuple[Part, ...]]


class Element(msgspec.Struct, frozen=True, tag="element"):
    """An element or component invocation with its attributes and children."""

    name: Union[TagName, ComponentRef]
    # Read-only: cached IR is shared by every render of the template
    attributes: Mapping[str, AttrIR] = msgspec.field(
        default_factory=lambda: MappingProxyType({})
    )
    children: Tuple["IRNode", ...] = ()

    @property
    def is_component(self) -> bool:
        return isinstance(self.name, ComponentRef)


IRNode = Union[Text, MarkerRef, Element]


def _encode_extra(obj: Any) -> Any:
    if isinstance(obj, MappingProxyType):
        return dict(obj)
    if callable(obj):
        return getattr(obj, "__qualname__", None) or repr(obj)
    raise NotImplementedError(f"Can't encode {type(obj).__name__}")


def dump_json(ir: IRNode) -> bytes:
    """Encode IR as indented JSON. Components are shown by qualified name."""
    return msgspec.json.format(msgspec.json.encode(ir, enc_hook=_encode_extra))
