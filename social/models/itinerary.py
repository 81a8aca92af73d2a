"""Model for trip itineraries shown in discovery and profile pages."""

import uuid
from django.conf import settings
from django.db import models


class Itinerary(models.Model):
    """A trip plan created by a user."""
    STATUS_DRAFT = "draft"
    STATUS_ACTIVE = "active"
    STATUS_COMPLETED = "completed"
    STATUS_CANCELLED = "cancelled"

    STATUSES = [
        (STATUS_DRAFT, "Draft"),
        (STATUS_ACTIVE, "Active"),
        (STATUS_COMPLETED, "Completed"),
        (STATUS_CANCELLED, "Cancelled"),
    ]

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    creator = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="itineraries",
        db_column="creator_id",
    )
    title = models.CharField(max_length=255)
    destination = models.CharField(max_length=255, blank=True)
    status = models.CharField(max_length=20, choices=STATUSES, default=STATUS_DRAFT)
    is_archived = models.BooleanField(default=False)

    # cached number of rows in itinerary_likes for this itinerary
    like_count = models.PositiveIntegerField(default=0)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = "itineraries"

    def __str__(self):
        return self.title
