# catalog_tree/models/base.py
from datetime import datetime
from typing import Optional
import pytz
from pydantic import BaseModel, ConfigDict, field_validator

class TimeStampedModel(BaseModel):
    """Base model with timestamp fields, always held in UTC"""
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)

    @field_validator("created_at", "updated_at")
    @classmethod
    def _as_utc(cls, value: Optional[datetime]) -> Optional[datetime]:
        # the catalog API sends naive timestamps in UTC
        if value is None:
            return None
        if value.tzinfo is None:
            return pytz.utc.localize(value)
        return value.astimezone(pytz.utc)
