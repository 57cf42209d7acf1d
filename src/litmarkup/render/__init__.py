"""litmarkup.render - render IR to a live tree or to text.

The engine walks the IR; backends decide what the output is.
"""

from litmarkup.render.backends import Backend, TextBackend, TreeBackend
from litmarkup.render.engine import Pending, Ready, RenderEngine, join, lift, unwrap

__all__ = [
    "Backend",
    "TextBackend",
    "TreeBackend",
    "RenderEngine",
    "Ready",
    "Pending",
    "join",
    "lift",
    "unwrap",
]
