"""Record of what the application did to the dependency graph."""
from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Iterable, List, Optional

from depgraph.graph.ids import utc_now


@dataclass(frozen=True)
class Event:
    """One entry in the log: an executed action or a skipped ingestion item."""

    ts: str
    level: str
    action: str
    msg: str
    packages: tuple[str, ...] = ()
    details: Optional[dict] = None

    def to_payload(self) -> dict:
        payload = asdict(self)
        payload["packages"] = list(self.packages)
        return payload


@dataclass
class EventBus:
    """Append-only in-memory log of graph events.

    Positions returned by :meth:`mark` let a caller collect the events one
    request produced with :meth:`since`.
    """

    events: List[Event] = field(default_factory=list)

    def emit(
        self,
        *,
        level: str,
        action: str,
        msg: str,
        packages: Iterable[str] = (),
        details: Optional[dict] = None,
    ) -> Event:
        event = Event(
            ts=utc_now(),
            level=level,
            action=action,
            msg=msg,
            packages=tuple(packages),
            details=details,
        )
        self.events.append(event)
        return event

    def mark(self) -> int:
        return len(self.events)

    def since(self, mark: int) -> list[Event]:
        return self.events[mark:]

    def history(self, *, level: str | None = None, package: str | None = None) -> list[Event]:
        """Return past events, optionally only those at ``level`` or touching ``package``."""

        folded = package.lower() if package else None
        return [
            event
            for event in self.events
            if (level is None or event.level == level)
            and (folded is None or folded in (name.lower() for name in event.packages))
        ]
