"""Helpers for writing activity feed events."""

from social.models import ActivityEvent


def record_activity(user_id, event_type, related_id="", target_user_id=None):
    """Create and return an activity event for user_id."""
    return ActivityEvent.objects.create(
        user_id=user_id,
        event_type=event_type,
        related_id=str(related_id or ""),
        target_user_id=target_user_id,
    )
