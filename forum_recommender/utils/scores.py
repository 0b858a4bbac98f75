"""
Score helpers: freshness, popularity, and time utilities used by both branches.
"""

import math
from datetime import datetime, timezone
from typing import Optional


def as_utc(dt: Optional[datetime]) -> Optional[datetime]:
    """Timezone-aware datetime; naive values are taken as UTC."""
    if dt is None:
        return None
    if dt.tzinfo is None:
        return dt.replace(tzinfo=timezone.utc)
    return dt


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def days_since(dt: Optional[datetime], now: datetime) -> Optional[float]:
    """Fractional days between dt and now, or None when dt is missing."""
    dt = as_utc(dt)
    if dt is None:
        return None
    return (as_utc(now) - dt).total_seconds() / 86400.0


def hours_since(dt: Optional[datetime], now: datetime) -> Optional[float]:
    """Fractional hours between dt and now, or None when dt is missing."""
    days = days_since(dt, now)
    return None if days is None else days * 24.0


def freshness_score(age_days: Optional[float]) -> float:
    """
    Piecewise recency decay (non-increasing in age).

    <=1 day: 1.0; <=7 days: 0.8 + 0.2*e^(-age/3);
    <=30 days: 0.5 + 0.3*e^(-(age-7)/10); older: 0.2*e^(-(age-30)/30).
    Missing age → 0.5.
    """
    if age_days is None:
        return 0.5
    if age_days <= 1:
        return 1.0
    if age_days <= 7:
        return 0.8 + 0.2 * math.exp(-age_days / 3)
    if age_days <= 30:
        return 0.5 + 0.3 * math.exp(-(age_days - 7) / 10)
    return 0.2 * math.exp(-(age_days - 30) / 30)


def popularity_score(
    reply_count: int,
    like_count: int,
    view_count: int,
    hours_since_publish: Optional[float],
) -> float:
    """
    Engagement popularity (0–1).

    0.4 * replies/50 + 0.3 * likes/20 + 0.2 * views/200 (each capped at 1),
    plus up to 0.1 for threads published in the last 24 hours.
    """
    score = 0.0
    if reply_count:
        score += 0.4 * min(1.0, reply_count / 50)
    if like_count:
        score += 0.3 * min(1.0, like_count / 20)
    if view_count:
        score += 0.2 * min(1.0, view_count / 200)
    if hours_since_publish is not None:
        # Future timestamps count as just published
        hours = max(0.0, hours_since_publish)
        if hours <= 24:
            score += 0.1 * (1 - hours / 24)
    return min(1.0, score)
