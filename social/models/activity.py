"""Activity feed events and the comments threaded under them."""

import uuid
from django.conf import settings
from django.db import models


class ActivityEvent(models.Model):
    """Something a user did that is shown in followers' feeds."""
    TYPE_NEW_PHOTO = "new_photo"
    TYPE_NEW_TRIP = "new_trip"
    TYPE_JOINED_TRIP = "joined_trip"
    TYPE_LEFT_TRIP = "left_trip"
    TYPE_NEW_REVIEW = "new_review"
    TYPE_FOLLOW = "follow"
    TYPE_LIKE_ON_POST = "like_on_post"
    TYPE_COMMENT_ON_POST = "comment_on_post"

    TYPES = [
        (TYPE_NEW_PHOTO, "New photo"),
        (TYPE_NEW_TRIP, "New trip"),
        (TYPE_JOINED_TRIP, "Joined trip"),
        (TYPE_LEFT_TRIP, "Left trip"),
        (TYPE_NEW_REVIEW, "New review"),
        (TYPE_FOLLOW, "Follow"),
        (TYPE_LIKE_ON_POST, "Like on post"),
        (TYPE_COMMENT_ON_POST, "Comment on post"),
    ]

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="activity_events",
    )
    event_type = models.CharField(max_length=30, choices=TYPES)
    related_id = models.CharField(max_length=64, blank=True)
    target_user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        null=True,
        blank=True,
        related_name="+",
    )
    like_count = models.PositiveIntegerField(default=0)
    comment_count = models.PositiveIntegerField(default=0)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = "activity_feed_events"
        ordering = ["-created_at"]

    def __str__(self):
        return f"ActivityEvent({self.user_id}, {self.event_type})"


class ActivityComment(models.Model):
    """Comment or reply on an activity event."""
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    event = models.ForeignKey(
        ActivityEvent,
        on_delete=models.CASCADE,
        related_name="comments",
    )
    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="activity_comments",
    )
    parent = models.ForeignKey(
        "self",
        on_delete=models.CASCADE,
        null=True,
        blank=True,
        related_name="replies",
    )
    content = models.TextField(max_length=2000)
    like_count = models.PositiveIntegerField(default=0)
    reply_count = models.PositiveIntegerField(default=0)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = "activity_feed_comments"

    def __str__(self):
        return f"ActivityComment by {self.user_id} on {self.event_id}"
