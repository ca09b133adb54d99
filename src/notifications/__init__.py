from src.notifications.planner import (
    NotificationPlanner,
    batched,
    extract_mentions,
    ping_candidates,
    reviewer_candidates,
)

__all__ = [
    "NotificationPlanner",
    "batched",
    "extract_mentions",
    "ping_candidates",
    "reviewer_candidates",
]
