# catalog_tree/services/tree_builder.py
"""
Builds the category forest from a flat, normalized batch.

Nodes own their children lists; there are no back-references to parents.
Every node in the result is a copy, so the input batch is never touched.
"""
import logging
from typing import Callable, Dict, Iterator, List, Optional, Sequence, Set, Tuple, Union

from ..models.category import Category
from ..models.query import SortDirection, SortField

logger = logging.getLogger(__name__)


def _sorted_siblings(nodes: Sequence[Category], field: SortField, reverse: bool) -> List[Category]:
    def key(node: Category):
        value = getattr(node, field.value)
        return value.lower() if isinstance(value, str) else value

    # absent values go last in both directions
    present = [node for node in nodes if getattr(node, field.value) is not None]
    absent = [node for node in nodes if getattr(node, field.value) is None]
    return sorted(present, key=key, reverse=reverse) + absent


def copy_tree(roots: Sequence[Category],
              order: Optional[Callable[[Sequence[Category]], Sequence[Category]]] = None,
              keep: Optional[Callable[[Category, List[Category]], bool]] = None) -> List[Category]:
    """
    Post-order copy of a forest, built with an explicit stack.

    ``order`` rearranges each sibling list before it is copied. ``keep``
    receives a node and its already copied children and decides whether the
    node's copy is emitted. A node whose id is already on the current path is
    skipped, so cyclic input terminates.
    """
    arrange = order or list
    copied: List[Category] = []
    frames: List[Tuple[Optional[Category], Iterator[Category], List[Category]]] = [
        (None, iter(arrange(roots)), copied)
    ]
    on_path: Set[int] = set()

    while frames:
        node, pending, children = frames[-1]
        child = next(pending, None)
        if child is not None:
            if child.id in on_path:
                logger.warning(f"Category {child.id} is its own ancestor, branch skipped")
                continue
            on_path.add(child.id)
            frames.append((child, iter(arrange(child.children)), []))
            continue

        frames.pop()
        if node is None:
            continue
        on_path.discard(node.id)
        if keep is None or keep(node, children):
            frames[-1][2].append(node.model_copy(update={"children": children}))

    return copied


def sort_tree(roots: Sequence[Category], sort_by: Union[SortField, str],
              direction: Union[SortDirection, str] = SortDirection.ASC) -> List[Category]:
    """Copy of the forest with every sibling list stably sorted"""
    field = SortField(sort_by)
    reverse = SortDirection(direction) is SortDirection.DESC
    return copy_tree(roots, order=lambda nodes: _sorted_siblings(nodes, field, reverse))


def _promote_unreachable(categories: Sequence[Category], nodes: Dict[int, Category],
                         roots: List[Category]) -> None:
    """Break parent cycles by promoting every node no root can reach"""
    reached = {node.id for node, _ in walk_tree(roots)}
    if len(reached) == len(nodes):
        return

    for category in categories:
        if category.id in reached:
            continue
        node = nodes[category.id]
        parent = nodes[category.parent_id]
        parent.children = [child for child in parent.children if child is not node]
        roots.append(node)
        reached.update(n.id for n, _ in walk_tree([node]))
        logger.warning(
            f"Category {node.id} is part of a parent cycle, placed at root level"
        )


def build_tree(categories: Sequence[Category],
               sort_by: Optional[Union[SortField, str]] = None,
               direction: Union[SortDirection, str] = SortDirection.ASC) -> List[Category]:
    """
    Convert a flat list of categories into a forest of root nodes.

    Categories whose parent_id is missing, self-referencing or not present in
    the batch become roots. Children keep the order of the input list unless
    ``sort_by`` is given.
    """
    nodes: Dict[int, Category] = {}
    roots: List[Category] = []

    # First pass: copy every record with its own empty children list
    for category in categories:
        if category.id not in nodes:
            nodes[category.id] = category.model_copy(update={"children": []})

    # Second pass: attach to parents in input order
    placed: Set[int] = set()
    for category in categories:
        if category.id in placed:
            logger.warning(f"Duplicate category id {category.id} in batch, ignored")
            continue
        placed.add(category.id)
        node = nodes[category.id]
        parent_id = category.parent_id

        if parent_id is not None and parent_id != category.id and parent_id in nodes:
            parent = nodes[parent_id]
            parent.children.append(node)
            logger.debug(f"Added {node.name} ({node.id}) to parent {parent.name} ({parent.id})")
        else:
            if parent_id is not None:
                logger.debug(f"Parent {parent_id} of category {node.id} not in batch, placed at root level")
            roots.append(node)

    _promote_unreachable(categories, nodes, roots)

    if sort_by is not None:
        roots = sort_tree(roots, sort_by, direction)

    logger.debug(f"Built category tree: {len(roots)} roots, {len(nodes)} nodes")
    return roots


def walk_tree(roots: Sequence[Category]) -> Iterator[Tuple[Category, int]]:
    """Depth-first pre-order walk yielding (node, depth); each id is visited once"""
    visited: Set[int] = set()
    stack: List[Tuple[Category, int]] = [(node, 0) for node in reversed(roots)]

    while stack:
        node, depth = stack.pop()
        if node.id in visited:
            logger.warning(f"Category {node.id} reached twice while walking tree, skipped")
            continue
        visited.add(node.id)
        yield node, depth
        stack.extend((child, depth + 1) for child in reversed(node.children))


def flatten_tree(roots: Sequence[Category]) -> List[Category]:
    return [node for node, _ in walk_tree(roots)]


def count_nodes(roots: Sequence[Category]) -> int:
    return sum(1 for _ in walk_tree(roots))


def find_node(roots: Sequence[Category], category_id: int) -> Optional[Category]:
    for node, _ in walk_tree(roots):
        if node.id == category_id:
            return node
    return None


def ancestor_path(categories: Sequence[Category], category_id: int) -> List[int]:
    """Ids from the outermost resolvable ancestor down to ``category_id``"""
    by_id = {category.id: category for category in categories}
    if category_id not in by_id:
        return []

    path = []
    seen = set()
    current = by_id.get(category_id)
    while current is not None and current.id not in seen:
        seen.add(current.id)
        path.append(current.id)
        current = by_id.get(current.parent_id) if current.parent_id is not None else None

    return list(reversed(path))
