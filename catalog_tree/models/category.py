# catalog_tree/models/category.py
from typing import Optional, List
from pydantic import Field
from .base import TimeStampedModel

class Category(TimeStampedModel):
    """Category model for product categorization"""
    id: int
    name: str = ""
    slug: str = ""
    description: Optional[str] = None
    parent_id: Optional[int] = None
    image: Optional[str] = None
    is_active: bool = True
    sort_order: int = 0
    meta_title: Optional[str] = None
    meta_description: Optional[str] = None
    products_count: Optional[int] = None

    # Not part of the fetched shape, populated by the tree builder
    children: List['Category'] = Field(default_factory=list, exclude=True)

    @property
    def has_children(self) -> bool:
        return len(self.children) > 0

    def __repr__(self) -> str:
        return f"<Category {self.id} {self.name!r}>"
