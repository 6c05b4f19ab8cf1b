"""Per-graph storage for nodes and their outgoing relations."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Generic, Iterator, List, MutableMapping, Tuple, TypeVar

from .errors import NotFoundError

V = TypeVar("V")


class CaseInsensitiveDict(MutableMapping[str, V], Generic[V]):
    """Ordered mapping whose string keys are matched case-insensitively.

    Probe keys are lower-cased before lookup. The casing used when a key is
    first inserted is kept, so iteration yields keys as they were added.
    """

    def __init__(self, data: Dict[str, V] | None = None) -> None:
        self._store: Dict[str, Tuple[str, V]] = {}
        if data:
            self.update(data)

    def __getitem__(self, key: str) -> V:
        return self._store[key.lower()][1]

    def __setitem__(self, key: str, value: V) -> None:
        folded = key.lower()
        original = self._store[folded][0] if folded in self._store else key
        self._store[folded] = (original, value)

    def __delitem__(self, key: str) -> None:
        del self._store[key.lower()]

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and key.lower() in self._store

    def __iter__(self) -> Iterator[str]:
        return (original for original, _ in self._store.values())

    def __len__(self) -> int:
        return len(self._store)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({dict(self.items())!r})"


@dataclass
class NodeStore:
    """Mapping from node name to the record stored for that node."""

    nodes: CaseInsensitiveDict[Any] = field(default_factory=CaseInsensitiveDict)

    def exists(self, name: str) -> bool:
        return name in self.nodes

    def get(self, name: str) -> Any:
        if name not in self.nodes:
            raise NotFoundError(name)
        return self.nodes[name]

    def set(self, name: str, node: Any) -> None:
        """Insert or overwrite ``name``; duplicate checks live in the graph."""

        self.nodes[name] = node

    def names(self) -> List[str]:
        """Return node names in insertion order."""

        return list(self.nodes)


@dataclass
class RelationStore:
    """Mapping from node name to its outgoing edges (target name -> payload)."""

    relations: CaseInsensitiveDict[CaseInsensitiveDict[Any]] = field(default_factory=CaseInsensitiveDict)

    def init(self, name: str) -> None:
        """Create an empty edge bucket for ``name``."""

        self.relations[name] = CaseInsensitiveDict()

    def get(self, name: str) -> CaseInsensitiveDict[Any]:
        if name not in self.relations:
            raise NotFoundError(name)
        return self.relations[name]

    def set(self, name: str, to: str, payload: Any) -> None:
        self.get(name)[to] = payload

    def exists(self, name: str, to: str) -> bool:
        return name in self.relations and to in self.relations[name]

    def dependants_of(self, name: str) -> Dict[str, Any]:
        """Return ``{source: payload}`` for every bucket holding an edge to ``name``."""

        return {source: edges[name] for source, edges in self.relations.items() if name in edges}


__all__ = ["CaseInsensitiveDict", "NodeStore", "RelationStore"]
