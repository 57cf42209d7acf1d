"""Render engine - walks IR with a substitution array against a backend.

Every step returns Ready(value) or Pending(awaitable). Rendering stays
synchronous until some child is actually awaitable; only then is the
sibling group joined with asyncio.gather.
"""

from __future__ import annotations

import asyncio
import inspect
from dataclasses import dataclass
from typing import Any, Awaitable, Callable, Generic, Sequence, TypeVar, Union

from litmarkup.config import Settings
from litmarkup.exceptions import SubstitutionIndexError
from litmarkup.ir.nodes import AttrIR, ComponentRef, Element, IRNode, MarkerRef, Text
from litmarkup.render.backends import Backend, TextBackend

T = TypeVar("T")


@dataclass(frozen=True)
class Ready(Generic[T]):
    value: T

    def then(self, fn: Callable[[T], Any]) -> "Result":
        return lift(fn(self.value))


@dataclass(frozen=True)
class Pending(Generic[T]):
    awaitable: Awaitable[T]
    # Upstream results this one consumes; closed along with it
    sources: tuple["Pending", ...] = ()

    def then(self, fn: Callable[[T], Any]) -> "Pending":
        async def chained() -> Any:
            result = fn(await self.awaitable)
            if inspect.isawaitable(result):
                result = await result
            return result

        return Pending(chained(), (self,))

    def close(self) -> None:
        """Discard without awaiting, closing any unstarted coroutines."""
        for source in self.sources:
            source.close()
        close = getattr(self.awaitable, "close", None)
        if close is not None:
            close()


Result = Union[Ready, Pending]


def lift(value: Any) -> Result:
    """Wrap a plain value as Ready and an awaitable as Pending."""
    if inspect.isawaitable(value):
        return Pending(value)
    return Ready(value)


def unwrap(result: Result) -> Any:
    """Plain value for Ready, the awaitable for Pending."""
    if isinstance(result, Pending):
        return result.awaitable
    return result.value


def join(results: Sequence[Result]) -> Result:
    """Combine results: Ready(list) if none pending, else one Pending.

    Order is preserved regardless of completion order. The first failure
    fails the whole group.
    """
    if not any(isinstance(result, Pending) for result in results):
        return Ready([result.value for result in results])

    async def gather() -> list[Any]:
        values: list[Any] = [
            None if isinstance(result, Pending) else result.value for result in results
        ]
        positions = [i for i, result in enumerate(results) if isinstance(result, Pending)]
        settled = await asyncio.gather(*(results[i].awaitable for i in positions))
        for i, value in zip(positions, settled):
            values[i] = value
        return values

    pending = tuple(result for result in results if isinstance(result, Pending))
    return Pending(gather(), pending)


class RenderEngine:
    """Renders IR against a backend."""

    def __init__(self, backend: Backend, settings: Settings):
        self.backend = backend
        self.settings = settings
        self._attribute_backend = TextBackend()

    def render(self, ir: IRNode, substitutions: Sequence[Any]) -> Result:
        if isinstance(ir, Text):
            return Ready(self.backend.render_text(ir.value))
        if isinstance(ir, MarkerRef):
            return self._render_substitution(ir, substitutions)
        if isinstance(ir, Element):
            return self._render_element(ir, substitutions)
        raise TypeError(f"Not an IR node: {ir!r}")

    def _lookup(self, marker: MarkerRef, substitutions: Sequence[Any]) -> Any:
        if 0 <= marker.index < len(substitutions):
            return substitutions[marker.index]
        if self.settings.missing_substitution == "empty":
            return None
        raise SubstitutionIndexError(marker.index, len(substitutions))

    def _render_substitution(self, marker: MarkerRef, substitutions: Sequence[Any]) -> Result:
        value = self._lookup(marker, substitutions)
        if inspect.isawaitable(value):
            return Pending(value).then(self.backend.render_substitution)
        return Ready(self.backend.render_substitution(value))

    def _render_element(self, element: Element, substitutions: Sequence[Any]) -> Result:
        attributes = {
            name: self.render_attribute(value, substitutions)
            for name, value in element.attributes.items()
        }
        rendered: list[Result] = []
        try:
            for child in element.children:
                rendered.append(self.render(child, substitutions))
        except Exception:
            # Earlier siblings may hold coroutines that will now never be awaited
            _discard(rendered)
            raise
        children = join(rendered)

        def finish(values: list[Any]) -> Any:
            composed = self.backend.finalize_children(values)
            if isinstance(element.name, ComponentRef):
                return _call_component(element.name, attributes, composed)
            return self.backend.render_element(element.name.name, attributes, composed)

        return children.then(finish)

    def render_attribute(self, value: AttrIR, substitutions: Sequence[Any]) -> str:
        """Render an attribute value to text, synchronously.

        Awaitable substitutions are stringified, never awaited.
        """
        parts = value if isinstance(value, tuple) else (value,)
        rendered = []
        for part in parts:
            if isinstance(part, Text):
                rendered.append(self._attribute_backend.render_text(part.value))
            else:
                rendered.append(
                    self._attribute_backend.render_substitution(
                        self._lookup(part, substitutions)
                    )
                )
        return self._attribute_backend.finalize_children(rendered)


def _call_component(ref: ComponentRef, attributes: dict[str, str], children: Any) -> Any:
    props = dict(attributes)
    props["children"] = children
    return ref.component(props)


def _discard(results: Sequence[Result]) -> None:
    for result in results:
        if isinstance(result, Pending):
            result.close()
