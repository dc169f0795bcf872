"""
Migration data models
"""

from dataclasses import dataclass, field
from typing import Any, Dict, FrozenSet, List, Mapping, Optional, Set


@dataclass(frozen=True)
class EngineNamingSnapshot:
    """
    Point-in-time view of the engine namespace: every index and the aliases bound to it.
    Read once per migration; all decisions are made against it.
    """
    indices: Mapping[str, FrozenSet[str]] = field(default_factory=dict)

    @classmethod
    def from_alias_response(cls, response: Mapping[str, Any]) -> "EngineNamingSnapshot":
        """Build from an indices.get_alias() body: {index: {"aliases": {alias: {...}}}}"""
        indices = {}
        body = getattr(response, "body", response)
        for index, container in dict(body).items():
            aliases = (container or {}).get("aliases") or {}
            indices[index] = frozenset(aliases.keys())
        return cls(indices=indices)

    @property
    def index_names(self) -> Set[str]:
        return set(self.indices)

    @property
    def alias_names(self) -> Set[str]:
        names = set()
        for aliases in self.indices.values():
            names.update(aliases)
        return names

    @property
    def taken_names(self) -> Set[str]:
        """Union of index names and alias names (one shared namespace)"""
        return self.index_names | self.alias_names

    def indices_with_alias(self, alias: str) -> List[str]:
        """Names of indices currently carrying alias"""
        return sorted(index for index, aliases in self.indices.items() if alias in aliases)


@dataclass(frozen=True)
class MigrationPlan:
    """Decision computed from a snapshot, before any mutation"""
    alias: str
    prefix: str
    version: int
    index: str
    replaced_index: Optional[str]
    reindex: bool
    live_versions: List[int] = field(default_factory=list)

    def alias_actions(self) -> List[dict]:
        """Ordered actions for the single update_aliases request"""
        actions = []
        if self.replaced_index:
            actions.append({"remove": {"index": self.replaced_index, "alias": self.alias}})
        actions.append({"add": {"index": self.index, "alias": self.alias}})
        return actions


@dataclass
class MigrationResult:
    """Outcome of a successful migration"""
    replaced_index: Optional[str]
    alias: str
    index: str
    version: int
    responses: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict:
        return {
            "replaced_index": self.replaced_index,
            "alias": self.alias,
            "index": self.index,
            "version": self.version,
            "responses": dict(self.responses),
        }


@dataclass
class GenerationStatus:
    """Read-only view of the generations of one alias"""
    alias: str
    prefix: str
    versions: List[int] = field(default_factory=list)
    live_versions: List[int] = field(default_factory=list)

    @property
    def current_version(self) -> Optional[int]:
        return self.live_versions[0] if self.live_versions else None

    @property
    def retired_versions(self) -> List[int]:
        return [v for v in self.versions if v not in self.live_versions]
