"""Pipeline - fragments -> markup text -> DOM -> IR."""

from __future__ import annotations

import logging
import time
from typing import Sequence

from litmarkup.components import ComponentResolver
from litmarkup.config import Settings
from litmarkup.exceptions import MarkupSyntaxError
from litmarkup.ir.markers import join_fragments
from litmarkup.ir.nodes import IRNode
from litmarkup.ir.parser import MarkupParser, MinidomParser, find_parser_error
from litmarkup.ir.transform import Transformer

log = logging.getLogger(__name__)


class TemplateParser:
    """Parses template fragments (or joined markup text) into IR."""

    def __init__(
        self,
        resolver: ComponentResolver,
        settings: Settings,
        parser: MarkupParser | None = None,
    ):
        self.parser = parser or MinidomParser()
        self.transformer = Transformer(resolver, settings)

    def parse(self, fragments: Sequence[str]) -> IRNode:
        """Join fragments with markers and parse the result."""
        return self.parse_text(join_fragments(fragments))

    def parse_text(self, text: str) -> IRNode:
        """Parse already joined markup text.

        Raises:
            MarkupSyntaxError: if the parser reported invalid markup.
            NameResolutionError: if a component tag can't be resolved.
        """
        started = time.perf_counter()
        doc = self.parser.parse(text)

        error = find_parser_error(doc)
        if error is not None:
            raise MarkupSyntaxError(error)

        # Only the single root element is transformed.
        ir = self.transformer.transform(doc.documentElement)
        log.debug(
            "Parsed %d chars of markup in %.2f ms",
            len(text),
            (time.perf_counter() - started) * 1000,
        )
        return ir  # type: ignore[return-value]
