"""Swipe-to-match lifecycle and discovery."""

import logging
from datetime import timedelta

from django.conf import settings
from django.contrib.auth import get_user_model
from django.db import DatabaseError, transaction
from django.db.models import Q
from django.utils import timezone

from social.models import ActivityEvent, Block, Conversation, Itinerary, Match
from social.models.user import DELETED_USERNAME_PREFIX
from social.repos.follows_repo import FollowsRepo
from social.repos.matches_repo import MatchesRepo
from social.services.activity import record_activity
from social.services.base import ActorService
from social.services.blocks import ensure_not_blocked
from social.services.conversations import get_or_create_conversation
from social.services.errors import Forbidden, Internal, InvalidArgument, NotFound
from social.services.match_scoring import calculate_match_percentage
from social.services.results import ActionResult, service_action
from social.utils.uuid import canonical_pair, parse_uuid

logger = logging.getLogger(__name__)

User = get_user_model()


class MatchService(ActorService):
    def __init__(self, actor=None, repo=None, follows_repo=None):
        super().__init__(actor)
        self.repo = repo or MatchesRepo()
        self.follows_repo = follows_repo or FollowsRepo()

    @service_action("Failed to create match.")
    def create_match(self, user_id_1, user_id_2, initiated_by):
        """
        Record a right swipe by initiated_by on the other user of the pair.

        Returns `{status, is_new_match, match, conversation}`. The match row
        is committed before the conversation is provisioned; a provisioning
        failure is reported while the accepted match stays in place, and
        calling again completes it.
        """
        if not (user_id_1 and user_id_2 and initiated_by):
            raise InvalidArgument("Missing required fields.")
        if user_id_1 == user_id_2:
            raise InvalidArgument("Cannot match with yourself.")
        if initiated_by not in (user_id_1, user_id_2):
            raise InvalidArgument("The initiator must be one of the matched users.")
        self._require_actor_is(initiated_by)
        self._require_user(user_id_1)
        self._require_user(user_id_2)
        ensure_not_blocked(user_id_1, user_id_2, "You cannot match with this user.")

        id1, id2 = canonical_pair(user_id_1, user_id_2)
        with transaction.atomic():
            match, created = self.repo.lock_or_create_pending(id1, id2, initiated_by)
            is_new_match = False
            if not created and self.repo.accept_pending(match, initiated_by):
                is_new_match = True
                self.follows_repo.ensure_accepted(id1, id2)
                record_activity(id1, ActivityEvent.TYPE_FOLLOW, id2, id2)
                record_activity(id2, ActivityEvent.TYPE_FOLLOW, id1, id1)
                match.refresh_from_db()
                logger.info("Users %s and %s matched.", id1, id2)

        conversation = None
        if match.status == Match.STATUS_ACCEPTED:
            conversation = self._provision(match)

        if created:
            message = "Match request created."
        elif is_new_match:
            message = "Match accepted."
        else:
            message = f"Match already exists with status: {match.status}."
        return ActionResult.success(message, {
            "status": match.status,
            "is_new_match": is_new_match,
            "match": match,
            "conversation": conversation,
        })

    def _provision(self, match):
        try:
            with transaction.atomic():
                conversation, _ = get_or_create_conversation(
                    match.user1_id, match.user2_id, Conversation.STATUS_ACTIVE
                )
        except DatabaseError:
            logger.exception("Conversation provisioning failed for match %s.", match.pk)
            raise Internal("Match accepted but the conversation could not be created. Please try again.")
        return conversation

    @service_action("Failed to reject profile.")
    @transaction.atomic
    def reject_match(self, dismisser_id, dismissed_id):
        """Swipe left; hides the profile from discovery for the cooldown period."""
        self._require_actor_is(dismisser_id, "You can only reject profiles for yourself.")
        if dismisser_id == dismissed_id:
            raise InvalidArgument("Cannot reject yourself.")
        match = self.repo.for_pair(dismisser_id, dismissed_id, for_update=True)
        if match is None:
            id1, id2 = canonical_pair(dismisser_id, dismissed_id)
            self.repo.create(
                user1_id=id1,
                user2_id=id2,
                status=Match.STATUS_REJECTED,
                initiated_by_id=dismisser_id,
            )
        elif match.status == Match.STATUS_ACCEPTED:
            return ActionResult.success("Cannot reject an existing match.")
        else:
            self.repo.update(
                {"pk": match.pk},
                status=Match.STATUS_REJECTED,
                initiated_by_id=dismisser_id,
                updated_at=timezone.now(),
            )
        logger.info("User %s rejected %s.", dismisser_id, dismissed_id)
        return ActionResult.success("Profile rejected.")

    def _excluded_ids(self, user_id):
        excluded = {user_id} | self.follows_repo.accepted_ids(user_id)
        cooldown_start = timezone.now() - timedelta(days=settings.MATCH_REJECTION_COOLDOWN_DAYS)
        for match in self.repo.for_user(user_id):
            other_id = match.other_user_id(user_id)
            if match.status == Match.STATUS_ACCEPTED:
                excluded.add(other_id)
            elif match.initiated_by_id != user_id:
                continue
            elif match.status == Match.STATUS_PENDING:
                excluded.add(other_id)
            elif match.updated_at > cooldown_start:
                excluded.add(other_id)
        blocks = Block.objects.filter(Q(blocker_id=user_id) | Q(blocked_id=user_id))
        for blocker_id, blocked_id in blocks.values_list("blocker_id", "blocked_id"):
            excluded.add(blocked_id if blocker_id == user_id else blocker_id)
        return excluded

    @service_action("Failed to retrieve potential matches.")
    def potential_matches(self, user_id, offset=0, limit=None):
        """
        Return a page of discovery cards for user_id.

        Each card is `{"user", "match_percentage", "completed_trips"}`.
        """
        self._require_actor_is(user_id)
        viewer = self._require_user(user_id, "Could not find your profile to calculate matches.")
        if limit is None:
            limit = settings.DISCOVERY_PAGE_SIZE
        if offset < 0 or limit < 1:
            raise InvalidArgument("Offset must be >= 0 and limit >= 1.")

        candidates = list(
            User.objects.filter(profile_questions_completed=True)
            .exclude(pk__in=self._excluded_ids(user_id))
            .exclude(username__startswith=DELETED_USERNAME_PREFIX)
            .order_by("?")[offset:offset + limit]
        )
        if not candidates:
            return ActionResult.success("No potential matches found.", [])

        trips_by_creator = {}
        trips = Itinerary.objects.filter(
            creator_id__in=[c.pk for c in candidates],
            status=Itinerary.STATUS_COMPLETED,
            is_archived=False,
        ).order_by("-created_at")
        for trip in trips:
            trips_by_creator.setdefault(trip.creator_id, []).append(trip)

        cards = [
            {
                "user": candidate,
                "match_percentage": calculate_match_percentage(viewer, candidate),
                "completed_trips": trips_by_creator.get(candidate.pk, []),
            }
            for candidate in candidates
        ]
        return ActionResult.success("Potential matches retrieved successfully.", cards)

    @service_action("Failed to retrieve accepted matches.")
    def accepted_matches(self, user_id):
        partner_ids = self.repo.accepted_partner_ids(user_id)
        if not partner_ids:
            return ActionResult.success("No accepted matches found.", [])
        users = list(
            User.objects.filter(pk__in=partner_ids).exclude(username__startswith=DELETED_USERNAME_PREFIX)
        )
        return ActionResult.success("Accepted matches retrieved successfully.", users)

    @service_action("Failed to dismiss match notification.")
    def dismiss_match_notification(self, match_id):
        actor_id = self._require_actor("Unauthorized.")
        match_pk = parse_uuid(match_id)
        match = self.repo.first(pk=match_pk) if match_pk else None
        if match is None:
            raise NotFound("Match not found.")
        if match.user1_id == actor_id:
            self.repo.update({"pk": match.pk}, is_dismissed_by_user1=True)
        elif match.user2_id == actor_id:
            self.repo.update({"pk": match.pk}, is_dismissed_by_user2=True)
        else:
            raise Forbidden("You are not part of this match.")
        logger.info("User %s dismissed notification for match %s.", actor_id, match_id)
        return ActionResult.success("Match notification dismissed.")
