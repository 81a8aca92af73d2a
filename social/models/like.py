"""Like join tables; each row backs one unit of an entity's like_count."""

from django.conf import settings
from django.db import models

from .activity import ActivityComment, ActivityEvent
from .itinerary import Itinerary


class ItineraryLike(models.Model):
    """User like on an itinerary."""
    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        db_column='user_id',
        related_name='itinerary_likes'
    )
    itinerary = models.ForeignKey(
        Itinerary,
        on_delete=models.CASCADE,
        db_column='itinerary_id',
        related_name='likes'
    )
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        """Enforce one like per user/itinerary pair."""
        db_table = "itinerary_likes"
        constraints = [
            models.UniqueConstraint(fields=["user", "itinerary"], name="uniq_itinerary_likes_user_itinerary"),
        ]

    def __str__(self):
        return f"{self.user_id} → {self.itinerary_id}"


class ActivityEventLike(models.Model):
    """User like on an activity feed event."""
    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name='activity_event_likes'
    )
    event = models.ForeignKey(
        ActivityEvent,
        on_delete=models.CASCADE,
        related_name='likes'
    )
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = "activity_feed_likes"
        constraints = [
            models.UniqueConstraint(fields=["user", "event"], name="uniq_activity_feed_likes_user_event"),
        ]

    def __str__(self):
        return f"{self.user_id} → {self.event_id}"


class ActivityCommentLike(models.Model):
    """User like on an activity feed comment."""
    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name='activity_comment_likes'
    )
    comment = models.ForeignKey(
        ActivityComment,
        on_delete=models.CASCADE,
        related_name='likes'
    )
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = "activity_feed_comment_likes"
        constraints = [
            models.UniqueConstraint(fields=["user", "comment"], name="uniq_activity_feed_comment_likes_user_comment"),
        ]

    def __str__(self):
        return f"{self.user_id} → {self.comment_id}"
