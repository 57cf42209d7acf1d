"""Backends - output targets for the render engine."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Mapping, Sequence
from xml.dom import Node, minidom


class Backend(ABC):
    """The operations that define an output target."""

    @abstractmethod
    def render_text(self, text: str) -> Any:
        """Render literal template text."""

    @abstractmethod
    def render_substitution(self, value: Any) -> Any:
        """Render a substitution value.

        Values native to the backend pass through unchanged; anything else
        is coerced to text.
        """

    @abstractmethod
    def render_element(self, tag: str, attributes: Mapping[str, str], children: Any) -> Any:
        """Render an element from its resolved attributes and composed children."""

    @abstractmethod
    def finalize_children(self, children: Sequence[Any]) -> Any:
        """Compose rendered children into a single child-content value."""

    @property
    def name(self) -> str:
        return self.__class__.__name__


class TextBackend(Backend):
    """Serializes to markup text.

    Nothing is escaped; callers are responsible for escaping substitutions.
    """

    def render_text(self, text: str) -> str:
        return text

    def render_substitution(self, value: Any) -> str:
        return "" if value is None else str(value)

    def render_element(self, tag: str, attributes: Mapping[str, str], children: str) -> str:
        attribute_text = "".join(f' {name}="{value}"' for name, value in attributes.items())
        return f"<{tag}{attribute_text}>{children}</{tag}>"

    def finalize_children(self, children: Sequence[str]) -> str:
        return "".join(children)


class TreeBackend(Backend):
    """Builds a live xml.dom.minidom tree.

    Nodes are created by `document`; one is created per backend if not given.
    """

    def __init__(self, document: minidom.Document | None = None):
        self.document = document or minidom.Document()

    def render_text(self, text: str) -> minidom.Text:
        return self.document.createTextNode(text)

    def render_substitution(self, value: Any) -> Node:
        if isinstance(value, Node):
            return value
        return self.document.createTextNode("" if value is None else str(value))

    def render_element(
        self, tag: str, attributes: Mapping[str, str], children: Node
    ) -> minidom.Element:
        element = self.document.createElement(tag)
        for name, value in attributes.items():
            element.setAttribute(name, value)
        element.appendChild(children)
        return element

    def finalize_children(self, children: Sequence[Node]) -> minidom.DocumentFragment:
        fragment = self.document.createDocumentFragment()
        for child in children:
            fragment.appendChild(child)
        return fragment
