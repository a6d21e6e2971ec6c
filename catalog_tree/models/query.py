# catalog_tree/models/query.py
from enum import Enum
from typing import Any, Dict, List, Optional
from pydantic import BaseModel, Field
from .category import Category

class SortField(str, Enum):
    """Fields the catalog can sort categories by"""
    SORT_ORDER = "sort_order"
    NAME = "name"
    CREATED_AT = "created_at"
    UPDATED_AT = "updated_at"
    ID = "id"

class SortDirection(str, Enum):
    ASC = "asc"
    DESC = "desc"

class StatusFilter(str, Enum):
    """Activation status selector"""
    ALL = "all"
    ACTIVE = "active"
    INACTIVE = "inactive"

    def as_flag(self) -> Optional[bool]:
        if self is StatusFilter.ALL:
            return None
        return self is StatusFilter.ACTIVE

class CategoryQuery(BaseModel):
    """Parameters of one category listing request"""
    search: Optional[str] = None
    status: StatusFilter = StatusFilter.ALL
    parent_id: Optional[int] = None
    sort_by: Optional[SortField] = None
    sort_direction: SortDirection = SortDirection.DESC
    per_page: int = Field(default=15, ge=1, le=1000)
    page: int = Field(default=1, ge=1)

    def to_params(self) -> Dict[str, str]:
        """Render the query string sent to the catalog API"""
        params: Dict[str, Any] = {
            "search": (self.search or "").strip() or None,
            "is_active": self.status.as_flag(),
            "parent_id": self.parent_id,
            # without sort_by the server's own order is kept
            "sort_by": self.sort_by.value if self.sort_by else None,
            "sort_direction": self.sort_direction.value if self.sort_by else None,
            "per_page": self.per_page,
            "page": self.page,
        }
        rendered = {}
        for key, value in params.items():
            if value is None:
                continue
            if isinstance(value, bool):
                value = "1" if value else "0"
            rendered[key] = str(value)
        return rendered

class CategoryPage(BaseModel):
    """One page of a paginated category listing"""
    data: List[Category] = []
    current_page: int = 1
    last_page: int = 1
    per_page: int = 15
    total: int = 0

class CategoryStatistics(BaseModel):
    """Aggregate counts over one batch of categories"""
    total_categories: int = 0
    active_categories: int = 0
    inactive_categories: int = 0
    root_categories: int = 0
    subcategories: int = 0
    categories_with_products: int = 0
    empty_categories: int = 0
