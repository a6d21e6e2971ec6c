# catalog_tree/services/tree_filter.py
"""
Predicate filtering over an already built category forest.

A node survives when it matches the predicate itself or when any of its
descendants survives. Surviving nodes are copies that carry only their
surviving children, so non-matching branches are pruned at every depth while
ancestors of a match stay in place.
"""
from typing import Callable, List, Optional, Sequence

from ..models.category import Category
from .tree_builder import copy_tree

Predicate = Callable[[Category], bool]


def filter_tree(roots: Sequence[Category], predicate: Predicate) -> List[Category]:
    """Filtered copy of ``roots``; the input forest is left untouched"""
    return copy_tree(roots, keep=lambda node, children: bool(children) or predicate(node))


def status_predicate(is_active: bool) -> Predicate:
    def matches(node: Category) -> bool:
        return node.is_active == is_active
    return matches


def search_predicate(term: str) -> Predicate:
    """Case-insensitive substring match on name or description"""
    needle = (term or "").strip().lower()

    def matches(node: Category) -> bool:
        if needle in node.name.lower():
            return True
        return node.description is not None and needle in node.description.lower()
    return matches


def all_of(*predicates: Predicate) -> Predicate:
    def matches(node: Category) -> bool:
        return all(predicate(node) for predicate in predicates)
    return matches


def filter_by_status(roots: Sequence[Category], is_active: bool) -> List[Category]:
    return filter_tree(roots, status_predicate(is_active))


def filter_by_search(roots: Sequence[Category], term: str) -> List[Category]:
    return filter_tree(roots, search_predicate(term))


def apply_filters(roots: Sequence[Category], search: Optional[str] = None,
                  is_active: Optional[bool] = None) -> List[Category]:
    """
    Keep nodes matching every requested filter, plus their ancestors.

    ``None`` (or a blank search) leaves that filter off. With no filter at all
    the result is a full copy of the forest.
    """
    predicates = []
    if is_active is not None:
        predicates.append(status_predicate(is_active))
    if search and search.strip():
        predicates.append(search_predicate(search))
    return filter_tree(roots, all_of(*predicates))
