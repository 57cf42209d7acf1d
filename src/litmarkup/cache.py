"""Template cache - fragment sequence -> parsed IR."""

from __future__ import annotations

import logging
import threading
import weakref
from collections import OrderedDict
from typing import Sequence

from litmarkup.ir.nodes import IRNode
from litmarkup.ir.pipeline import TemplateParser

log = logging.getLogger(__name__)


class TemplateCache:
    """Caches IR per template occurrence for one component scope.

    Fragment sequences that can be weakly referenced are keyed by identity
    and dropped when the template object goes away. Plain tuples and lists
    can't be weakly referenced; those are keyed by their content in a
    bounded LRU instead. The component map lives in `parser`, so a cache
    must not be shared between scopes. Every lookup, including the LRU
    update on a hit, runs under one lock.
    """

    def __init__(self, parser: TemplateParser, maxsize: int = 512):
        self.parser = parser
        self.maxsize = maxsize
        self.hits = 0
        self.misses = 0
        self._by_identity: dict[int, tuple[weakref.ref, IRNode]] = {}
        self._by_content: "OrderedDict[tuple[str, ...], IRNode]" = OrderedDict()
        self._lock = threading.Lock()

    def get_or_parse(self, fragments: Sequence[str]) -> IRNode:
        """Return cached IR for `fragments`, parsing on a miss."""
        with self._lock:
            ir = self._get(fragments)
            if ir is not None:
                self.hits += 1
                return ir

            self.misses += 1
            log.debug("Template cache miss (%d fragments)", len(fragments))
            ir = self.parser.parse(fragments)
            self._set(fragments, ir)
            return ir

    def clear(self) -> None:
        with self._lock:
            self._by_identity.clear()
            self._by_content.clear()
            self.hits = 0
            self.misses = 0

    def __len__(self) -> int:
        return len(self._by_identity) + len(self._by_content)

    def _get(self, fragments: Sequence[str]) -> IRNode | None:
        entry = self._by_identity.get(id(fragments))
        if entry is not None and entry[0]() is fragments:
            return entry[1]

        if _weakrefable(fragments):
            return None
        key = tuple(fragments)
        ir = self._by_content.get(key)
        if ir is not None:
            self._by_content.move_to_end(key)
        return ir

    def _set(self, fragments: Sequence[str], ir: IRNode) -> None:
        if _weakrefable(fragments):
            key = id(fragments)
            ref = weakref.ref(fragments, lambda _: self._by_identity.pop(key, None))
            self._by_identity[key] = (ref, ir)
            return

        self._by_content[tuple(fragments)] = ir
        while len(self._by_content) > self.maxsize:
            self._by_content.popitem(last=False)
            log.debug("Evicted least recently used template from cache")


def _weakrefable(obj: object) -> bool:
    try:
        weakref.ref(obj)
    except TypeError:
        return False
    return True
