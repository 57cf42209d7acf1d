"""Public entry points.

Tagged-template style: `strings` is the sequence of literal fragments and
`values` the substitutions between them. A PEP 750 template (any object
with `.strings` and `.values`) may be passed alone instead.

    render_markup_to_text(["<div>Hello ", "!</div>"], "world")
    # '<div>Hello world!</div>'
"""

from __future__ import annotations

from typing import Any, Callable, Mapping, Sequence

from litmarkup.cache import TemplateCache
from litmarkup.components import ChainResolver, Component, ComponentResolver, default_registry
from litmarkup.config import Settings, get_settings
from litmarkup.ir.nodes import IRNode
from litmarkup.ir.parser import MarkupParser
from litmarkup.ir.pipeline import TemplateParser
from litmarkup.render.backends import Backend, TextBackend, TreeBackend
from litmarkup.render.engine import RenderEngine, unwrap

TemplateFn = Callable[..., Any]

_default_cache: TemplateCache | None = None


def from_template(template: Any) -> tuple[Sequence[str], tuple[Any, ...]]:
    """Split a template object into (strings, values)."""
    return template.strings, tuple(template.values)


def _template_args(strings: Any, values: tuple[Any, ...]) -> tuple[Sequence[str], tuple[Any, ...]]:
    if not values and hasattr(strings, "strings") and hasattr(strings, "values"):
        return from_template(strings)
    return strings, values


def _make_parser(
    component_map: Mapping[str, Component] | None,
    resolver: ComponentResolver | None,
    parser: MarkupParser | None,
    settings: Settings,
) -> TemplateParser:
    fallback = resolver if resolver is not None else default_registry
    return TemplateParser(ChainResolver(component_map, fallback), settings, parser=parser)


def get_default_cache() -> TemplateCache:
    """The process-wide cache used by render_markup_to_tree/_text."""
    global _default_cache
    if _default_cache is None:
        settings = get_settings()
        _default_cache = TemplateCache(
            _make_parser(None, None, None, settings), maxsize=settings.cache_size
        )
    return _default_cache


# --- IR access ---


def parse_template(
    strings: Sequence[str],
    component_map: Mapping[str, Component] | None = None,
    *,
    resolver: ComponentResolver | None = None,
    parser: MarkupParser | None = None,
    settings: Settings | None = None,
) -> IRNode:
    """Parse template fragments to IR without touching any cache."""
    settings = settings or get_settings()
    return _make_parser(component_map, resolver, parser, settings).parse(strings)


def parse_markup_text(
    text: str,
    component_map: Mapping[str, Component] | None = None,
    *,
    resolver: ComponentResolver | None = None,
    parser: MarkupParser | None = None,
    settings: Settings | None = None,
) -> IRNode:
    """Parse markup text that already contains [[[n]]] markers."""
    settings = settings or get_settings()
    return _make_parser(component_map, resolver, parser, settings).parse_text(text)


def render_ir(
    ir: IRNode,
    substitutions: Sequence[Any],
    backend: Backend,
    settings: Settings | None = None,
) -> Any:
    """Render IR against any backend.

    Returns the output directly, or an awaitable for it when some child
    was awaitable.
    """
    engine = RenderEngine(backend, settings or get_settings())
    return unwrap(engine.render(ir, substitutions))


def render_ir_to_tree(
    ir: IRNode, substitutions: Sequence[Any], *, settings: Settings | None = None
) -> Any:
    return render_ir(ir, substitutions, TreeBackend(), settings)


def render_ir_to_text(
    ir: IRNode, substitutions: Sequence[Any], *, settings: Settings | None = None
) -> Any:
    return render_ir(ir, substitutions, TextBackend(), settings)


# --- Template functions ---


def render_markup_to_tree(strings: Sequence[str], *values: Any) -> Any:
    strings, values = _template_args(strings, values)
    ir = get_default_cache().get_or_parse(strings)
    return render_ir_to_tree(ir, values)


def render_markup_to_text(strings: Sequence[str], *values: Any) -> Any:
    strings, values = _template_args(strings, values)
    ir = get_default_cache().get_or_parse(strings)
    return render_ir_to_text(ir, values)


def _bound(
    backend_factory: Callable[[], Backend],
    component_map: Mapping[str, Component] | None,
    resolver: ComponentResolver | None,
    settings: Settings | None,
) -> TemplateFn:
    settings = settings or get_settings()
    # Private cache: component names resolve against this scope only
    cache = TemplateCache(
        _make_parser(component_map, resolver, None, settings), maxsize=settings.cache_size
    )

    def render(strings: Sequence[str], *values: Any) -> Any:
        strings, values = _template_args(strings, values)
        ir = cache.get_or_parse(strings)
        return render_ir(ir, values, backend_factory(), settings)

    render.cache = cache  # type: ignore[attr-defined]
    return render


def render_markup_to_tree_with(
    component_map: Mapping[str, Component] | None = None,
    *,
    resolver: ComponentResolver | None = None,
    settings: Settings | None = None,
) -> TemplateFn:
    """Template function building live trees with the given components."""
    return _bound(TreeBackend, component_map, resolver, settings)


def render_markup_to_text_with(
    component_map: Mapping[str, Component] | None = None,
    *,
    resolver: ComponentResolver | None = None,
    settings: Settings | None = None,
) -> TemplateFn:
    """Template function producing text with the given components."""
    return _bound(TextBackend, component_map, resolver, settings)
