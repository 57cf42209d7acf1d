"""litmarkup.ir - markup parsing and the template intermediate representation."""

from litmarkup.ir.markers import collapse_whitespace, join_fragments, split_markers
from litmarkup.ir.nodes import (
    AttrIR,
    ComponentRef,
    Element,
    IRNode,
    MarkerRef,
    TagName,
    Text,
    dump_json,
)
from litmarkup.ir.parser import MarkupParser, MinidomParser, find_parser_error
from litmarkup.ir.pipeline import TemplateParser
from litmarkup.ir.transform import Transformer

__all__ = [
    "AttrIR",
    "ComponentRef",
    "Element",
    "IRNode",
    "MarkerRef",
    "TagName",
    "Text",
    "dump_json",
    "collapse_whitespace",
    "join_fragments",
    "split_markers",
    "MarkupParser",
    "MinidomParser",
    "find_parser_error",
    "TemplateParser",
    "Transformer",
]
