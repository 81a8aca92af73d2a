"""Model for one-to-one conversations keyed by a canonical user pair."""

import uuid

from django.conf import settings
from django.db import models
from django.db.models import F, Q


class Conversation(models.Model):
    """Direct message channel between two users."""
    STATUS_ACTIVE = "active"
    STATUS_REQUEST = "request"

    STATUSES = [
        (STATUS_ACTIVE, "Active"),
        (STATUS_REQUEST, "Request"),
    ]

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    user1 = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="+",
    )
    user2 = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="+",
    )
    status = models.CharField(max_length=20, choices=STATUSES, default=STATUS_REQUEST)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        """Canonical, unique user pair."""
        db_table = "conversations"
        constraints = [
            models.UniqueConstraint(fields=["user1", "user2"], name="uniq_conversations_user_pair"),
            models.CheckConstraint(condition=Q(user1__lt=F("user2")), name="chk_conversations_user_order"),
        ]

    def __str__(self):
        return f"Conversation({self.user1_id}, {self.user2_id}, {self.status})"
