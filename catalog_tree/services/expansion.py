# catalog_tree/services/expansion.py
from typing import FrozenSet, Iterable, Optional, Sequence, Set

from ..models.category import Category
from .tree_builder import walk_tree


class ExpansionState:
    """Ids of the tree nodes currently shown expanded"""

    def __init__(self, expanded: Optional[Iterable[int]] = None):
        self._expanded: Set[int] = set(expanded or ())

    @classmethod
    def from_tree(cls, roots: Sequence[Category]) -> "ExpansionState":
        """Every node owning at least one child starts expanded"""
        return cls(node.id for node, _ in walk_tree(roots) if node.children)

    def reset(self, roots: Sequence[Category]) -> None:
        """Discard current state and recompute it for a freshly built tree"""
        self._expanded = {node.id for node, _ in walk_tree(roots) if node.children}

    def toggle(self, category_id: int) -> bool:
        """Flip one node; returns whether it is now expanded"""
        if category_id in self._expanded:
            self._expanded.discard(category_id)
            return False
        self._expanded.add(category_id)
        return True

    def is_expanded(self, category_id: int) -> bool:
        return category_id in self._expanded

    def expand_all(self, roots: Sequence[Category]) -> None:
        self.reset(roots)

    def collapse_all(self) -> None:
        self._expanded.clear()

    @property
    def expanded_ids(self) -> FrozenSet[int]:
        return frozenset(self._expanded)

    def __contains__(self, category_id) -> bool:
        return category_id in self._expanded

    def __len__(self) -> int:
        return len(self._expanded)

    def __repr__(self) -> str:
        return f"<ExpansionState expanded={sorted(self._expanded)}>"
