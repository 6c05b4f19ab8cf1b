"""Action routing for the dependency graph API."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Dict, Tuple

ActionHandler = Callable[[dict], dict]


@dataclass(frozen=True)
class Route:
    """A registered action: its handler and the params it cannot run without."""

    handler: ActionHandler
    required: Tuple[str, ...] = ()

    def missing(self, params: dict) -> list[str]:
        return [key for key in self.required if params.get(key) in (None, "")]


@dataclass
class ActionRouter:
    """Dispatch graph actions to handlers after checking their required params."""

    routes: Dict[str, Route] = field(default_factory=dict)

    def register(self, action: str, handler: ActionHandler, *, required: Tuple[str, ...] = ()) -> None:
        self.routes[action] = Route(handler=handler, required=tuple(required))

    def actions(self) -> list[str]:
        return sorted(self.routes)

    def dispatch(self, action: str, params: dict) -> dict:
        """Run ``action`` with ``params``.

        Unknown actions and missing required params raise :class:`KeyError`
        naming what was expected.
        """

        route = self.routes.get(action)
        if route is None:
            raise KeyError(f"Unknown action: {action} (expected one of: {', '.join(self.actions())})")
        missing = route.missing(params)
        if missing:
            raise KeyError(f"Action '{action}' requires: {', '.join(missing)}")
        return route.handler(params)
