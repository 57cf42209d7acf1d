"""Transformer - converts a parsed DOM tree into substitution-independent IR."""

from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Iterable, List, Mapping
from xml.dom import Node

from litmarkup.components import ComponentResolver
from litmarkup.config import Settings
from litmarkup.exceptions import NameResolutionError, UnsupportedNodeError
from litmarkup.ir.markers import split_markers
from litmarkup.ir.nodes import (
    AttrIR,
    ComponentRef,
    Element,
    IRNode,
    TagName,
)

log = logging.getLogger(__name__)

TEXT_NODE_TYPES = (Node.TEXT_NODE, Node.CDATA_SECTION_NODE)
IGNORABLE_NODE_TYPES = {
    Node.COMMENT_NODE: "comment",
    Node.PROCESSING_INSTRUCTION_NODE: "processing instruction",
}


class Transformer:
    """Transforms DOM nodes into IR.

    Upper-case tag names are components and are resolved through
    `resolver` at transform time, so an unknown component fails the whole
    template even if it would never be rendered.
    """

    def __init__(self, resolver: ComponentResolver, settings: Settings):
        self.resolver = resolver
        self.settings = settings

    def transform(self, node: Node) -> IRNode | tuple[IRNode, ...]:
        """Transform a single node.

        Text nodes yield a Text, a bare MarkerRef, or a tuple of parts that
        the caller splices into its children.
        """
        if node.nodeType in TEXT_NODE_TYPES:
            return split_markers(node.data)
        if node.nodeType == Node.ELEMENT_NODE:
            return self._transform_element(node)
        raise UnsupportedNodeError(node.nodeName, getattr(node, "data", ""))

    def transform_children(self, nodes: Iterable[Node]) -> tuple[IRNode, ...]:
        result: List[IRNode] = []
        for node in nodes:
            kind = IGNORABLE_NODE_TYPES.get(node.nodeType)
            if kind is not None:
                if self.settings.comments == "error":
                    raise UnsupportedNodeError(kind, getattr(node, "data", ""))
                log.debug("Dropping %s node from markup", kind)
                continue

            transformed = self.transform(node)
            if isinstance(transformed, tuple):
                # Text split by markers: splice parts in at this level
                result.extend(transformed)
            else:
                result.append(transformed)
        return tuple(result)

    def _transform_element(self, node: Node) -> Element:
        local_name = node.localName or node.tagName
        return Element(
            name=self._resolve_name(local_name),
            attributes=self._transform_attributes(node),
            children=self.transform_children(node.childNodes),
        )

    def _resolve_name(self, local_name: str) -> TagName | ComponentRef:
        if not local_name[0].isupper():
            return TagName(local_name)
        fn = self.resolver.resolve(local_name)
        if fn is None:
            raise NameResolutionError(local_name)
        return ComponentRef(name=local_name, component=fn)

    def _transform_attributes(self, node: Node) -> Mapping[str, AttrIR]:
        return MappingProxyType(
            {name: split_markers(value) for name, value in node.attributes.items()}
        )
