"""Model recording one user blocking another."""

from django.conf import settings
from django.db import models
from django.db.models import Q, F


class Block(models.Model):
    """Unilateral block from blocker to blocked, scoped by type."""
    TYPE_DM = "dm"
    TYPE_PROFILE = "profile"

    TYPES = [
        (TYPE_DM, "Direct messages"),
        (TYPE_PROFILE, "Profile"),
    ]

    blocker = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="blocks_made",
    )
    blocked = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="blocks_received",
    )
    block_type = models.CharField(max_length=20, choices=TYPES, default=TYPE_DM)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        """A user can block another once per block type."""
        db_table = "blocks"
        constraints = [
            models.UniqueConstraint(
                fields=["blocker", "blocked", "block_type"],
                name="uniq_blocks_blocker_blocked_type",
            ),
            models.CheckConstraint(
                condition=~Q(blocker=F("blocked")),
                name="chk_blocks_not_self",
            ),
        ]

    def __str__(self):
        return f"Block({self.blocker_id} -x- {self.blocked_id}, {self.block_type})"
