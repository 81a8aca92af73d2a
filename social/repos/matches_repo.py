"""Repository helpers for match rows."""

from typing import Optional, Tuple

from django.db import IntegrityError, transaction
from django.db.models import Q
from django.utils import timezone

from social.db_accessor import DBAccessor
from social.models.match import Match
from social.utils.uuid import canonical_pair


class MatchesRepo(DBAccessor):
    """Repository wrapper around Match keyed by the canonical user pair."""

    def __init__(self) -> None:
        super().__init__(Match)

    def for_pair(self, user_a: str, user_b: str, *, for_update: bool = False) -> Optional[Match]:
        id1, id2 = canonical_pair(user_a, user_b)
        return self.query(filters={"user1_id": id1, "user2_id": id2}, for_update=for_update).first()

    def lock_or_create_pending(self, user_a: str, user_b: str, initiated_by: str) -> Tuple[Match, bool]:
        """
        Return (row, created) for the pair, inserting a pending row if absent.

        The insert runs in a savepoint; when a concurrent swipe wins the
        insert race the winner's row is re-read under lock.
        """
        match = self.for_pair(user_a, user_b, for_update=True)
        if match is not None:
            return match, False
        id1, id2 = canonical_pair(user_a, user_b)
        try:
            with transaction.atomic():
                match = self.create(
                    user1_id=id1,
                    user2_id=id2,
                    initiated_by_id=initiated_by,
                    status=Match.STATUS_PENDING,
                )
            return match, True
        except IntegrityError:
            return self.for_pair(id1, id2, for_update=True), False

    def accept_pending(self, match: Match, accepted_by: str) -> int:
        """Flip a pending row started by the other party to accepted."""
        return (
            self.query(
                filters={"pk": match.pk, "status": Match.STATUS_PENDING},
                exclude={"initiated_by_id": accepted_by},
            )
            .update(
                status=Match.STATUS_ACCEPTED,
                is_dismissed_by_user1=False,
                is_dismissed_by_user2=False,
                updated_at=timezone.now(),
            )
        )

    def for_user(self, user_id: str):
        return self.query(where=Q(user1_id=user_id) | Q(user2_id=user_id))

    def accepted_partner_ids(self, user_id: str) -> set:
        rows = self.for_user(user_id).filter(status=Match.STATUS_ACCEPTED).values_list("user1_id", "user2_id")
        return {id2 if id1 == user_id else id1 for id1, id2 in rows}
