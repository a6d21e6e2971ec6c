# catalog_tree/services/normalizer.py
import logging
from collections.abc import Mapping
from typing import Any, Dict, Iterable, List, Optional

from pydantic import ValidationError

from ..exceptions import MalformedRecordError
from ..models.category import Category

logger = logging.getLogger(__name__)

# Fields that fall back to the model default when the API sends null
_DEFAULTED_FIELDS = ("name", "slug", "is_active", "sort_order")

# Keys owned by the tree builder or by related resources, never read from input
_RUNTIME_FIELDS = ("children", "parent")


def _image_url(value: Any) -> Optional[str]:
    """Image may arrive as a plain URL or as an attachment object"""
    if isinstance(value, Mapping):
        value = value.get("src") or value.get("url")
    if not value or not isinstance(value, str):
        return None
    return value


def normalize_record(raw: Any) -> Category:
    """Shape one fetched record into a Category with empty children"""
    if not isinstance(raw, Mapping):
        raise MalformedRecordError(f"Category record must be a mapping, got {type(raw).__name__}", raw)

    if raw.get("id") in (None, ""):
        raise MalformedRecordError("Category record has no id", raw)

    data: Dict[str, Any] = {
        key: value for key, value in raw.items()
        if key not in _RUNTIME_FIELDS
    }
    for key in _DEFAULTED_FIELDS:
        if data.get(key) is None:
            data.pop(key, None)

    # 0 and "" are how the API spells "no parent"
    if not data.get("parent_id"):
        data["parent_id"] = None
    data["image"] = _image_url(data.get("image"))

    try:
        return Category.model_validate(data)
    except ValidationError as e:
        failed = {error["loc"][0] for error in e.errors() if error["loc"]}
        if not failed or "id" in failed:
            raise MalformedRecordError(f"Invalid category record {raw.get('id')!r}: {e}", raw) from e

    # Unusable optional values fall back to absent; a bad parent_id makes a root
    for field in failed:
        if field in _DEFAULTED_FIELDS:
            data.pop(field, None)
        else:
            data[field] = None
    logger.warning(
        f"Category {raw.get('id')!r}: discarded unusable {', '.join(sorted(map(str, failed)))}"
    )

    try:
        return Category.model_validate(data)
    except ValidationError as e:
        raise MalformedRecordError(f"Invalid category record {raw.get('id')!r}: {e}", raw) from e


def normalize_records(raws: Iterable[Any]) -> List[Category]:
    """Normalize a fetched batch, skipping malformed and duplicate records"""
    categories: List[Category] = []
    seen = set()
    skipped = 0

    for raw in raws:
        try:
            category = normalize_record(raw)
        except MalformedRecordError as e:
            logger.warning(f"Skipping malformed category record: {e}")
            skipped += 1
            continue

        if category.id in seen:
            logger.warning(f"Skipping duplicate category id {category.id}")
            skipped += 1
            continue

        seen.add(category.id)
        categories.append(category)

    if skipped:
        logger.info(f"Normalized {len(categories)} categories, skipped {skipped}")
    return categories
