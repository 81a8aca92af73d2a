"""Like toggles and activity comment counters."""

import logging
from dataclasses import dataclass

from django.db import IntegrityError, transaction
from django.db.models import F, IntegerField, Value
from django.db.models.functions import Greatest

from social.models import (
    ActivityComment,
    ActivityCommentLike,
    ActivityEvent,
    ActivityEventLike,
    Itinerary,
    ItineraryLike,
)
from social.models.user import DELETED_USERNAME_PREFIX
from social.services.base import ActorService
from social.services.errors import Conflict, Forbidden, InvalidArgument, NotFound
from social.services.results import ActionResult, service_action
from social.utils.uuid import parse_uuid

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LikeTarget:
    """How likes on one kind of entity are stored and counted."""
    entity_model: type
    like_model: type
    field: str
    counter: str = "like_count"


LIKE_TARGETS = {
    "itinerary": LikeTarget(Itinerary, ItineraryLike, "itinerary"),
    "activity_event": LikeTarget(ActivityEvent, ActivityEventLike, "event"),
    "activity_comment": LikeTarget(ActivityComment, ActivityCommentLike, "comment"),
}


def increment(model, pk, counter, by=1):
    """Add `by` to a counter column in one UPDATE; return rows changed."""
    return model.objects.filter(pk=pk).update(**{counter: F(counter) + by})


def decrement(model, pk, counter):
    """Subtract one from a counter column without going below zero."""
    floored = Greatest(F(counter) - 1, Value(0), output_field=IntegerField())
    return model.objects.filter(pk=pk).update(**{counter: floored})


class EngagementService(ActorService):
    def _target(self, entity_kind):
        target = LIKE_TARGETS.get(entity_kind)
        if target is None:
            raise InvalidArgument(f"Unknown entity kind: {entity_kind}.")
        return target

    def _entity_pk(self, entity_id, message="Entity ID is required."):
        if not entity_id:
            raise InvalidArgument(message)
        pk = parse_uuid(entity_id)
        if pk is None:
            raise NotFound("Item not found.")
        return pk

    @service_action("Failed to toggle like.")
    @transaction.atomic
    def toggle_like(self, entity_id, entity_kind):
        """
        Like or unlike an entity for the actor.

        Returns `{liked, new_count}`. The like row and the counter change
        commit together or not at all.
        """
        actor_id = self._require_actor("Unauthorized: User not logged in.")
        target = self._target(entity_kind)
        pk = self._entity_pk(entity_id)
        lookup = {"user_id": actor_id, f"{target.field}_id": pk}

        deleted, _ = target.like_model.objects.filter(**lookup).delete()
        if deleted:
            liked = False
            updated = decrement(target.entity_model, pk, target.counter)
        else:
            liked = True
            try:
                with transaction.atomic():
                    target.like_model.objects.create(**lookup)
            except IntegrityError:
                if not target.entity_model.objects.filter(pk=pk).exists():
                    raise NotFound("Item not found.")
                raise Conflict("Like is already being updated. Please try again.")
            updated = increment(target.entity_model, pk, target.counter)

        if not updated:
            raise NotFound("Item not found.")

        new_count = (
            target.entity_model.objects.filter(pk=pk).values_list(target.counter, flat=True).first()
        )
        logger.info("User %s %s %s %s.", actor_id, "liked" if liked else "unliked", entity_kind, pk)
        return ActionResult.success(
            "Liked successfully." if liked else "Unliked successfully.",
            {"liked": liked, "new_count": new_count},
        )

    @service_action("Failed to check like status.")
    def is_liked(self, entity_id, entity_kind):
        target = self._target(entity_kind)
        actor_id = self.actor_id
        pk = parse_uuid(entity_id)
        if not actor_id or pk is None:
            return ActionResult.success("User not logged in." if not actor_id else "Item not found.", False)
        liked = target.like_model.objects.filter(user_id=actor_id, **{f"{target.field}_id": pk}).exists()
        return ActionResult.success("Like status retrieved.", liked)

    @service_action("Failed to get liked itineraries.")
    def liked_itineraries(self):
        actor_id = self._require_actor("Unauthorized: User not logged in.")
        itineraries = list(
            Itinerary.objects.filter(likes__user_id=actor_id)
            .exclude(creator__username__startswith=DELETED_USERNAME_PREFIX)
            .select_related("creator")
            .order_by("-likes__created_at")
        )
        return ActionResult.success("Liked itineraries retrieved successfully.", itineraries)

    @service_action("Failed to post comment.")
    @transaction.atomic
    def create_activity_comment(self, event_id, content, parent_id=None):
        """Comment on an event, or reply to parent_id, and bump the matching counter."""
        actor_id = self._require_actor("Unauthorized: User not logged in.")
        content = (content or "").strip()
        if not event_id or not content:
            raise InvalidArgument("Event ID and content are required.")
        event_pk = self._entity_pk(event_id, "Event ID and content are required.")
        if not ActivityEvent.objects.filter(pk=event_pk).exists():
            raise NotFound("Activity event not found.")

        parent = None
        if parent_id:
            parent_pk = parse_uuid(parent_id)
            parent = ActivityComment.objects.filter(pk=parent_pk, event_id=event_pk).first() if parent_pk else None
            if parent is None:
                raise NotFound("Parent comment not found.")

        comment = ActivityComment.objects.create(
            event_id=event_pk, user_id=actor_id, parent=parent, content=content
        )
        if parent is not None:
            increment(ActivityComment, parent.pk, "reply_count")
        else:
            increment(ActivityEvent, event_pk, "comment_count")
        return ActionResult.success("Reply posted." if parent else "Comment posted.", comment)

    @service_action("Failed to delete comment.")
    @transaction.atomic
    def delete_activity_comment(self, comment_id):
        actor_id = self._require_actor("Unauthorized.")
        pk = self._entity_pk(comment_id, "Comment ID is required.")
        comment = ActivityComment.objects.select_for_update().filter(pk=pk).first()
        if comment is None:
            raise NotFound("Comment not found.")
        if comment.user_id != actor_id:
            raise Forbidden("You can only delete your own comments.")

        parent_id, event_id = comment.parent_id, comment.event_id
        comment.delete()
        if parent_id:
            decrement(ActivityComment, parent_id, "reply_count")
        else:
            decrement(ActivityEvent, event_id, "comment_count")
        return ActionResult.success("Comment deleted.")
