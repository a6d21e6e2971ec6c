# catalog_tree/exceptions.py
from typing import Any, Optional

class CatalogTreeError(Exception):
    """Base class for catalog tree errors"""

class MalformedRecordError(CatalogTreeError, ValueError):
    """A fetched record lacks a usable identity and cannot join the tree"""

    def __init__(self, message: str, record: Any = None):
        super().__init__(message)
        self.record = record

class CatalogAPIError(CatalogTreeError):
    """The catalog service rejected a request or could not be reached"""

    def __init__(self, message: str, status: Optional[int] = None):
        super().__init__(message)
        self.status = status
