"""
UserActivity Domain Entity
Append-only timeline entry
"""
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Dict, Optional


@dataclass(frozen=True)
class UserActivity:
    user_id: str
    action: str
    id: Optional[int] = None
    description: Optional[str] = None
    metadata: Optional[Dict[str, Any]] = None
    created_at: Optional[datetime] = None

    def __post_init__(self):
        if not self.action:
            raise ValueError("Activity action cannot be empty")
