"""Model for directional follow edges with request/accept semantics."""

from django.conf import settings
from django.db import models
from django.db.models import Q, F


class Follow(models.Model):
    """Follow edge from follower to following, pending until accepted."""
    STATUS_PENDING = "pending"
    STATUS_ACCEPTED = "accepted"

    STATUSES = [
        (STATUS_PENDING, "Pending"),
        (STATUS_ACCEPTED, "Accepted"),
    ]

    follower = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="following_edges",   # user.following_edges -> rows this user created (outbound)
        db_column="follower_id",
    )
    following = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="follower_edges",    # user.follower_edges -> rows pointing to this user (inbound)
        db_column="following_id",
    )
    status = models.CharField(max_length=20, choices=STATUSES, default=STATUS_PENDING)
    is_dismissed_by_follower = models.BooleanField(default=False)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        """One row per ordered pair, never self-referential."""
        db_table = "follows"
        constraints = [
            models.UniqueConstraint(
                fields=["follower", "following"],
                name="uniq_follows_follower_following",
            ),
            models.CheckConstraint(
                condition=~Q(follower=F("following")),
                name="chk_follows_not_self",
            ),
        ]
        indexes = [
            models.Index(fields=["following", "status"], name="follows_following_status_idx"),
        ]

    def __str__(self) -> str:
        """Readable summary of the edge and its status."""
        return f"Follow({self.follower_id} -> {self.following_id}, {self.status})"
