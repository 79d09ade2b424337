"""
Work-Readiness Scorer
Deterministic weighted sum over a user's credentials, 0..100
"""
from datetime import date, datetime, timezone
from typing import Iterable, Optional, Union

from workpass.domain.entities import Credential
from workpass.domain.enums import CredentialType


REQUIRED_TYPES = (CredentialType.WHITE_CARD.value, CredentialType.FIRST_AID.value)
REQUIRED_POINTS = 30

BONUS_TYPES = (CredentialType.TRADE_CERTIFICATE.value, CredentialType.LICENSE.value)
BONUS_POINTS = 10
BONUS_CAP = 40

MAX_SCORE = 100


def _as_date(now: Optional[Union[date, datetime]]) -> date:
    if now is None:
        return datetime.now(timezone.utc).date()
    if isinstance(now, datetime):
        return now.date()
    return now


def calculate_work_readiness_score(
    credentials: Iterable[Credential],
    now: Optional[Union[date, datetime]] = None
) -> int:
    """
    Score a credential set.

    Each required type (white card, first aid) is worth 30 points once a
    verified, unexpired credential of that type exists. Every verified,
    unexpired trade certificate or license adds 10 points, up to 40.

    Args:
        credentials: The user's active credentials
        now: Reference time for expiry checks (defaults to today, UTC)

    Returns:
        Integer score in [0, 100]
    """
    today = _as_date(now)
    valid = [c for c in credentials if c.counts_towards_readiness(today)]
    if not valid:
        return 0

    valid_types = {c.type for c in valid}
    required = sum(REQUIRED_POINTS for t in REQUIRED_TYPES if t in valid_types)

    bonus_count = sum(1 for c in valid if c.type in BONUS_TYPES)
    bonus = min(bonus_count * BONUS_POINTS, BONUS_CAP)

    return min(round(required + bonus), MAX_SCORE)
