"""litmarkup Exceptions

Errors raised while parsing markup templates and rendering them.
"""

from __future__ import annotations


class LitMarkupError(Exception):
    """Base exception for all litmarkup errors."""

    pass


class MarkupSyntaxError(LitMarkupError):
    """Raised when the markup parser reports invalid markup."""

    def __init__(self, diagnostic: str):
        self.diagnostic = diagnostic
        super().__init__(diagnostic)


class NameResolutionError(LitMarkupError, LookupError):
    """Raised when a component tag can't be resolved to a callable."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f'Couldn\'t find definition for "{name}".')


class UnsupportedNodeError(LitMarkupError):
    """Raised for markup nodes the dialect doesn't support (comments, PIs)."""

    def __init__(self, kind: str, content: str = ""):
        self.kind = kind
        self.content = content
        super().__init__(f"Unsupported {kind} node in markup: {content!r}")


class SubstitutionIndexError(LitMarkupError, IndexError):
    """Raised when a marker refers past the end of the substitution array."""

    def __init__(self, index: int, count: int):
        self.index = index
        self.count = count
        super().__init__(
            f"Marker [[[{index}]]] has no substitution ({count} value(s) supplied)"
        )


class ConfigError(LitMarkupError):
    """Raised when a settings file can't be loaded."""

    pass
