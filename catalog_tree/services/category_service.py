# catalog_tree/services/category_service.py
import logging
import math
from typing import Any, List, Optional, Sequence

from ..config import Config
from ..exceptions import CatalogTreeError
from ..models.category import Category
from ..models.query import CategoryPage, CategoryQuery, CategoryStatistics, StatusFilter
from .expansion import ExpansionState
from .normalizer import normalize_records
from .statistics import compute_statistics
from .tree_builder import build_tree
from .tree_filter import all_of, apply_filters, search_predicate, status_predicate

logger = logging.getLogger(__name__)


class CategorySnapshot:
    """Tree and table views derived from a single fetched batch"""

    def __init__(self, records: List[Category], full_tree: List[Category],
                 tree: List[Category], query: CategoryQuery):
        self.records = records
        self.full_tree = full_tree
        self.tree = tree
        self.query = query
        self.statistics: CategoryStatistics = compute_statistics(records)
        self.expansion = ExpansionState.from_tree(tree)

    @classmethod
    def from_records(cls, raw_records: Sequence[Any],
                     query: Optional[CategoryQuery] = None) -> "CategorySnapshot":
        """Normalize, build and filter one batch without any I/O"""
        query = query or CategoryQuery()
        records = normalize_records(raw_records)
        full_tree = build_tree(records, sort_by=query.sort_by, direction=query.sort_direction)
        tree = apply_filters(full_tree, search=query.search, is_active=query.status.as_flag())
        return cls(records, full_tree, tree, query)

    def matching_records(self) -> List[Category]:
        """Flat records that match the query filters directly"""
        predicates = []
        if self.query.status is not StatusFilter.ALL:
            predicates.append(status_predicate(self.query.status.as_flag()))
        if self.query.search and self.query.search.strip():
            predicates.append(search_predicate(self.query.search))
        if self.query.parent_id is not None:
            predicates.append(lambda category: category.parent_id == self.query.parent_id)
        matches = all_of(*predicates)
        return [category for category in self.records if matches(category)]

    def table_page(self, page: Optional[int] = None, per_page: Optional[int] = None) -> CategoryPage:
        """One page of the flat table view, cut from the same batch as the tree"""
        page = self.query.page if page is None else page
        per_page = Config.TABLE_PAGE_SIZE if per_page is None else per_page
        if page < 1 or per_page < 1:
            raise CatalogTreeError(f"Invalid page {page} / per_page {per_page}")

        rows = self.matching_records()
        last_page = max(1, math.ceil(len(rows) / per_page))
        start = (page - 1) * per_page
        return CategoryPage(
            data=rows[start:start + per_page],
            current_page=page,
            last_page=last_page,
            per_page=per_page,
            total=len(rows),
        )

    def toggle(self, category_id: int) -> bool:
        return self.expansion.toggle(category_id)


class CategoryService:
    """Runs category refresh cycles against the catalog service"""

    def __init__(self, client):
        self.client = client
        self.snapshot: Optional[CategorySnapshot] = None

    async def refresh(self, query: Optional[CategoryQuery] = None) -> CategorySnapshot:
        """Fetch every category once and rebuild both views from that batch"""
        query = query or CategoryQuery()

        # Filters are applied to the tree locally so ancestors of matches survive
        fetch_query = CategoryQuery(
            sort_by=query.sort_by,
            sort_direction=query.sort_direction,
            per_page=Config.TREE_PAGE_SIZE,
            page=1,
        )
        try:
            raw_records = await self.client.fetch_all_records(fetch_query)
        except CatalogTreeError as e:
            logger.error(f"Failed to load category tree: {e}")
            raise

        self.snapshot = CategorySnapshot.from_records(raw_records, query)
        logger.info(
            f"Category tree refreshed: {len(self.snapshot.records)} records, "
            f"{len(self.snapshot.tree)} root(s) shown"
        )
        return self.snapshot

    def toggle(self, category_id: int) -> bool:
        if self.snapshot is None:
            raise CatalogTreeError("No category tree loaded")
        return self.snapshot.toggle(category_id)
