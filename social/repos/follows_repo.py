"""Repository helpers for follow relationships."""

from typing import List, Optional

from django.contrib.auth import get_user_model
from django.db.models import Q
from django.utils import timezone

from social.db_accessor import DBAccessor
from social.models.follow import Follow
from social.models.user import DELETED_USERNAME_PREFIX

User = get_user_model()


def _pair(user_a, user_b):
    return Q(follower_id=user_a, following_id=user_b) | Q(follower_id=user_b, following_id=user_a)


class FollowsRepo(DBAccessor):
    """Repository wrapper for follow edges."""
    def __init__(self) -> None:
        """Initialise with the Follow model."""
        super().__init__(Follow)

    def edge(self, *, follower_id: str, following_id: str, for_update: bool = False) -> Optional[Follow]:
        """Return the follower -> following row, if any."""
        filters = {"follower_id": follower_id, "following_id": following_id}
        return self.query(filters=filters, for_update=for_update).first()

    def status_between(self, viewer_id: str, target_id: str):
        """Return (outgoing, incoming) statuses between viewer and target."""
        statuses = {
            (row["follower_id"], row["following_id"]): row["status"]
            for row in self.query(where=_pair(viewer_id, target_id)).values(
                "follower_id", "following_id", "status"
            )
        }
        return statuses.get((viewer_id, target_id)), statuses.get((target_id, viewer_id))

    def accept(self, *, follower_id: str, following_id: str) -> int:
        """Flip a pending row to accepted; return rows changed."""
        return self.update(
            {"follower_id": follower_id, "following_id": following_id, "status": Follow.STATUS_PENDING},
            status=Follow.STATUS_ACCEPTED,
            is_dismissed_by_follower=False,
            updated_at=timezone.now(),
        )

    def delete_pending(self, *, follower_id: str, following_id: str) -> int:
        return self.delete(follower_id=follower_id, following_id=following_id, status=Follow.STATUS_PENDING)

    def delete_accepted_between(self, user_a: str, user_b: str) -> int:
        """Remove accepted edges between the pair in both directions."""
        count, _ = self.query(filters={"status": Follow.STATUS_ACCEPTED}, where=_pair(user_a, user_b)).delete()
        return count

    def ensure_accepted(self, user_a: str, user_b: str) -> None:
        """Write accepted edges in both directions; a pending edge in either direction is upgraded."""
        for follower_id, following_id in ((user_a, user_b), (user_b, user_a)):
            self.model.objects.update_or_create(
                follower_id=follower_id,
                following_id=following_id,
                defaults={"status": Follow.STATUS_ACCEPTED},
            )

    def pending_requests(self, user_id: str, direction: str) -> List[Follow]:
        """Return pending rows to (incoming) or from (outgoing) user_id, newest first."""
        owner, other = ("following", "follower") if direction == "incoming" else ("follower", "following")
        qs = self.query(
            filters={f"{owner}_id": user_id, "status": Follow.STATUS_PENDING},
            exclude={f"{other}__username__startswith": DELETED_USERNAME_PREFIX},
            order_by=("-created_at",),
        )
        return list(qs.select_related("follower", "following"))

    def followers(self, user_id: str):
        """Users with an accepted edge pointing at user_id."""
        return (
            User.objects.filter(following_edges__following_id=user_id, following_edges__status=Follow.STATUS_ACCEPTED)
            .exclude(username__startswith=DELETED_USERNAME_PREFIX)
            .order_by("-username")
        )

    def following(self, user_id: str):
        """Users user_id has an accepted edge to."""
        return (
            User.objects.filter(follower_edges__follower_id=user_id, follower_edges__status=Follow.STATUS_ACCEPTED)
            .exclude(username__startswith=DELETED_USERNAME_PREFIX)
            .order_by("-username")
        )

    def mutuals(self, user_id: str):
        """Users with accepted edges in both directions with user_id."""
        return self.following(user_id).filter(
            following_edges__following_id=user_id,
            following_edges__status=Follow.STATUS_ACCEPTED,
        ).distinct()

    def accepted_ids(self, user_id: str) -> set:
        """Return ids user_id follows with an accepted edge."""
        return set(
            self.query(filters={"follower_id": user_id, "status": Follow.STATUS_ACCEPTED})
            .values_list("following_id", flat=True)
        )
