"""litmarkup - tagged-template markup rendered to live trees or text.

Templates are parsed once per occurrence into a cached IR, then rendered
with any number of substitution arrays against a backend.
"""

from litmarkup.api import (
    from_template,
    get_default_cache,
    parse_markup_text,
    parse_template,
    render_ir,
    render_ir_to_text,
    render_ir_to_tree,
    render_markup_to_text,
    render_markup_to_text_with,
    render_markup_to_tree,
    render_markup_to_tree_with,
)
from litmarkup.cache import TemplateCache
from litmarkup.components import ComponentRegistry, component, default_registry
from litmarkup.config import Settings
from litmarkup.exceptions import (
    ConfigError,
    LitMarkupError,
    MarkupSyntaxError,
    NameResolutionError,
    SubstitutionIndexError,
    UnsupportedNodeError,
)

__version__ = "0.1.0"

__all__ = [
    # Template functions
    "render_markup_to_tree",
    "render_markup_to_text",
    "render_markup_to_tree_with",
    "render_markup_to_text_with",
    "from_template",
    # IR access
    "parse_template",
    "parse_markup_text",
    "render_ir",
    "render_ir_to_tree",
    "render_ir_to_text",
    "get_default_cache",
    "TemplateCache",
    # Components
    "ComponentRegistry",
    "component",
    "default_registry",
    # Config and errors
    "Settings",
    "LitMarkupError",
    "MarkupSyntaxError",
    "NameResolutionError",
    "UnsupportedNodeError",
    "SubstitutionIndexError",
    "ConfigError",
]
