"""Match model for the swipe-to-match lifecycle.

Each unordered pair of users owns at most one row. The pair is stored in
canonical order (`user1_id < user2_id`) and the database enforces both the
ordering and the uniqueness, so a swipe from either side lands on the same
row.

Status moves `pending -> accepted` when the second user swipes right, or
to `rejected` when either user swipes left. Both outcomes are terminal.
"""

import uuid

from django.conf import settings
from django.db import models
from django.db.models import F, Q


class Match(models.Model):
    STATUS_PENDING = "pending"
    STATUS_ACCEPTED = "accepted"
    STATUS_REJECTED = "rejected"

    STATUSES = [
        (STATUS_PENDING, "Pending"),
        (STATUS_ACCEPTED, "Accepted"),
        (STATUS_REJECTED, "Rejected"),
    ]

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    user1 = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="+",
        db_column="user_id_1",
    )
    user2 = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="+",
        db_column="user_id_2",
    )
    status = models.CharField(max_length=20, choices=STATUSES, default=STATUS_PENDING)
    initiated_by = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="+",
        db_column="initiated_by",
    )
    is_dismissed_by_user1 = models.BooleanField(default=False)
    is_dismissed_by_user2 = models.BooleanField(default=False)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = "matches"
        constraints = [
            models.UniqueConstraint(fields=["user1", "user2"], name="uniq_matches_user_pair"),
            models.CheckConstraint(condition=Q(user1__lt=F("user2")), name="chk_matches_user_order"),
        ]

    def __str__(self):
        return f"Match({self.user1_id} <-> {self.user2_id}, {self.status})"

    def other_user_id(self, user_id):
        """Return the id of the participant that is not user_id."""
        return self.user2_id if self.user1_id == user_id else self.user1_id
