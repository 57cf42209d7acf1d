from __future__ import annotations

import logging
from typing import Protocol
from xml.dom import Node, minidom
from xml.parsers.expat import ExpatError

log = logging.getLogger(__name__)

PARSER_ERROR_TAG = "parsererror"


class MarkupParser(Protocol):
    """Turns markup text into a DOM document.

    Invalid markup must not raise: the returned document carries a
    `parsererror` element (as the document's first child or first
    grandchild) whose text content is the diagnostic.
    """

    def parse(self, text: str) -> minidom.Document: ...


class MinidomParser:
    """Default markup parser backed by xml.dom.minidom."""

    def parse(self, text: str) -> minidom.Document:
        try:
            return minidom.parseString(text.encode("utf-8"))
        except ExpatError as exc:
            log.debug("Markup rejected by expat: %s", exc)
            return error_document(str(exc))


def error_document(diagnostic: str) -> minidom.Document:
    """Build a document whose root is a parsererror element."""
    impl = minidom.getDOMImplementation()
    doc = impl.createDocument(None, PARSER_ERROR_TAG, None)
    doc.documentElement.appendChild(doc.createTextNode(diagnostic))
    return doc


def _is_error_node(node: Node | None) -> bool:
    return (
        node is not None
        and node.nodeType == Node.ELEMENT_NODE
        and node.nodeName == PARSER_ERROR_TAG
    )


def _text_content(node: Node) -> str:
    if node.nodeType in (Node.TEXT_NODE, Node.CDATA_SECTION_NODE):
        return node.data
    return "".join(_text_content(child) for child in node.childNodes)


def find_parser_error(doc: Node) -> str | None:
    """Return the diagnostic of an embedded parsererror node, if any.

    The error node might be the first child or the first grandchild.
    """
    child = doc.firstChild
    grandchild = child.firstChild if child is not None else None
    if _is_error_node(child):
        return _text_content(child)
    if _is_error_node(grandchild):
        return _text_content(grandchild)
    return None
