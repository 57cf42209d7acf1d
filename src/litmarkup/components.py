"""Component resolution.

Upper-case tags resolve first against the component map handed to the
parser, then against an ambient resolver. The ambient resolver defaults to
`default_registry`, a process-wide registry filled by the `component`
decorator.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Mapping, Protocol

log = logging.getLogger(__name__)

Component = Callable[[dict[str, Any]], Any]


class ComponentResolver(Protocol):
    def resolve(self, name: str) -> Component | None: ...


class ComponentRegistry:
    """Name -> component callable registry."""

    def __init__(self, components: Mapping[str, Component] | None = None):
        self._components: dict[str, Component] = dict(components or {})

    def register(self, fn: Component, name: str | None = None) -> Component:
        key = name or fn.__name__
        if key in self._components and self._components[key] is not fn:
            log.debug("Replacing registered component %s", key)
        self._components[key] = fn
        return fn

    def unregister(self, name: str) -> None:
        self._components.pop(name, None)

    def resolve(self, name: str) -> Component | None:
        return self._components.get(name)

    def __contains__(self, name: object) -> bool:
        return name in self._components

    def __len__(self) -> int:
        return len(self._components)


class ChainResolver:
    """Looks a name up in the component map, then the fallback resolver."""

    def __init__(
        self,
        component_map: Mapping[str, Component] | None,
        fallback: ComponentResolver | None,
    ):
        self.component_map = component_map or {}
        self.fallback = fallback

    def resolve(self, name: str) -> Component | None:
        found = self.component_map.get(name)
        if found is None and self.fallback is not None:
            found = self.fallback.resolve(name)
        return found


default_registry = ComponentRegistry()


def component(
    fn: Component | None = None,
    *,
    name: str | None = None,
    registry: ComponentRegistry | None = None,
) -> Any:
    """Register a callable as an ambient component.

    Usage:
        @component
        def Greeting(props): ...

        @component(name="Card")
        def render_card(props): ...
    """
    target = registry if registry is not None else default_registry

    def decorator(func: Component) -> Component:
        return target.register(func, name=name)

    if fn is not None:
        return decorator(fn)
    return decorator
