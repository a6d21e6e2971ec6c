# catalog_tree/services/statistics.py
from typing import Sequence

from ..models.category import Category
from ..models.query import CategoryStatistics
from .tree_builder import build_tree


def compute_statistics(categories: Sequence[Category]) -> CategoryStatistics:
    """Counts over one batch; root and subcategory counts follow the built tree"""
    roots = build_tree(categories)
    stats = CategoryStatistics(
        total_categories=len(categories),
        root_categories=len(roots),
        subcategories=len(categories) - len(roots),
    )

    for category in categories:
        if category.is_active:
            stats.active_categories += 1
        else:
            stats.inactive_categories += 1

        if category.products_count:
            stats.categories_with_products += 1
        else:
            stats.empty_categories += 1

    return stats
