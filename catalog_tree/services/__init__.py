"""Category hierarchy services"""
from .normalizer import normalize_record, normalize_records
from .tree_builder import (
    build_tree,
    sort_tree,
    copy_tree,
    walk_tree,
    flatten_tree,
    count_nodes,
    find_node,
    ancestor_path
)
from .tree_filter import (
    filter_tree,
    filter_by_status,
    filter_by_search,
    apply_filters,
    status_predicate,
    search_predicate,
    all_of
)
from .expansion import ExpansionState
from .statistics import compute_statistics
from .catalog_client import CatalogClient
from .category_service import CategoryService, CategorySnapshot

__all__ = [
    'normalize_record',
    'normalize_records',
    'build_tree',
    'sort_tree',
    'copy_tree',
    'walk_tree',
    'flatten_tree',
    'count_nodes',
    'find_node',
    'ancestor_path',
    'filter_tree',
    'filter_by_status',
    'filter_by_search',
    'apply_filters',
    'status_predicate',
    'search_predicate',
    'all_of',
    'ExpansionState',
    'compute_statistics',
    'CatalogClient',
    'CategoryService',
    'CategorySnapshot'
]
