"""
Job Domain Entity
Employer-posted work opportunity
"""
from dataclasses import dataclass
from datetime import date, datetime
from typing import Any, Optional

from ..enums import JobType


@dataclass(frozen=True)
class Job:
    """Job domain entity - immutable"""

    title: str
    company: str
    location: str
    id: Optional[int] = None

    description: Optional[str] = None
    requirements: Optional[Any] = None  # required credentials / skills
    pay_range: Optional[str] = None

    start_date: Optional[date] = None
    end_date: Optional[date] = None
    job_type: Optional[JobType] = None

    is_active: bool = True

    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    def __post_init__(self):
        if not self.title or len(self.title.strip()) == 0:
            raise ValueError("Job title cannot be empty")
        if self.start_date and self.end_date and self.end_date < self.start_date:
            raise ValueError("Job end date cannot be before start date")

    def __str__(self) -> str:
        return f"{self.title} at {self.company}"
