"""Hierarchy builder for treemap / sunburst views."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Optional, Sequence

from awards.aggregate import KeyFn, group_by
from awards.records import CanonicalRecord

PLACEHOLDER = "—"


@dataclass
class HierarchyNode:
    name: str
    value: int = 0
    children: List["HierarchyNode"] = field(default_factory=list)

    @property
    def is_leaf(self) -> bool:
        return not self.children

    def sum_values(self) -> int:
        """Recompute internal values bottom-up from the leaf counts."""
        if not self.is_leaf:
            self.value = sum(child.sum_values() for child in self.children)
        return self.value

    def leaves(self) -> List["HierarchyNode"]:
        if self.is_leaf:
            return [self]
        out: List[HierarchyNode] = []
        for child in self.children:
            out.extend(child.leaves())
        return out

    def to_dict(self) -> Dict[str, Any]:
        if self.is_leaf:
            return {"name": self.name, "value": self.value}
        return {"name": self.name, "value": self.value, "children": [c.to_dict() for c in self.children]}


def _label(key: Optional[object]) -> str:
    if key is None:
        return PLACEHOLDER
    s = str(key).strip()
    return s or PLACEHOLDER


def _build_level(name: str, records: List[CanonicalRecord], level_key_fns: Sequence[KeyFn]) -> HierarchyNode:
    if not level_key_fns:
        return HierarchyNode(name=name, value=len(records))
    key_fn, rest = level_key_fns[0], level_key_fns[1:]
    groups = group_by(records, lambda r: _label(key_fn(r)), list)
    return HierarchyNode(name=name, children=[_build_level(k, part, rest) for k, part in groups.items()])


def build_hierarchy(
    records: Iterable[CanonicalRecord],
    level_key_fns: Sequence[KeyFn],
    *,
    root_name: str = "root",
) -> HierarchyNode:
    """Group records level by level into a tree whose leaves hold record counts.

    Missing keys become the "—" placeholder so every record lands in a leaf.
    """
    root = _build_level(root_name, list(records), list(level_key_fns))
    root.sum_values()
    return root
