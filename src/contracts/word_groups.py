from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True, slots=True)
class WordGroup:
    key: str  # first code point shared by every token
    tokens: list[str]  # ordered: length desc, then text asc

    def to_dict(self) -> dict[str, Any]:
        return {"key": self.key, "tokens": list(self.tokens)}

    @staticmethod
    def from_dict(d: dict[str, Any]) -> "WordGroup":
        return WordGroup(
            key=str(d["key"]),
            tokens=[str(x) for x in (d.get("tokens") or [])],
        )


@dataclass(frozen=True, slots=True)
class DroppedGroup:
    key: str
    tokens: list[str]
    reason: str  # e.g. "below_min_group_size:2"

    def to_dict(self) -> dict[str, Any]:
        return {"key": self.key, "tokens": list(self.tokens), "reason": self.reason}

    @staticmethod
    def from_dict(d: dict[str, Any]) -> "DroppedGroup":
        return DroppedGroup(
            key=str(d["key"]),
            tokens=[str(x) for x in (d.get("tokens") or [])],
            reason=str(d.get("reason", "")),
        )


@dataclass(frozen=True, slots=True)
class WordGroupingResult:
    ok: bool
    errors: list[str]
    meta: dict[str, Any]  # deterministic config + version, counts, dropped groups
    groups: list[WordGroup]  # ordered by key asc

    def as_mapping(self) -> dict[str, list[str]]:
        """
        Ordered key -> tokens view. Insertion order of the returned dict is the group order.
        """
        return {g.key: list(g.tokens) for g in self.groups}

    def dropped_groups(self) -> list[DroppedGroup]:
        """
        Groups removed by the size filter, restored from `meta["dropped_groups"]` (key asc).
        """
        return [DroppedGroup.from_dict(d) for d in (self.meta.get("dropped_groups") or [])]

    def to_dict(self) -> dict[str, Any]:
        return {
            "ok": self.ok,
            "errors": list(self.errors),
            "meta": dict(self.meta),
            "groups": [g.to_dict() for g in self.groups],
        }

    @staticmethod
    def from_dict(d: dict[str, Any]) -> "WordGroupingResult":
        groups_raw = d.get("groups") or []
        return WordGroupingResult(
            ok=bool(d.get("ok", False)),
            errors=[str(x) for x in (d.get("errors") or [])],
            meta=dict(d.get("meta") or {}),
            groups=[WordGroup.from_dict(g) for g in groups_raw],
        )
