"""
Activity timeline schemas
"""
from datetime import datetime
from typing import Any, Dict, Optional

from .base import CamelModel


class ActivityResponse(CamelModel):
    id: int
    user_id: str
    action: str
    description: Optional[str] = None
    metadata: Optional[Dict[str, Any]] = None
    created_at: Optional[datetime] = None
