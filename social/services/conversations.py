"""Conversation provisioning keyed by the canonical user pair."""

import logging

from django.db import IntegrityError, transaction

from social.models import Conversation
from social.services.base import ActorService
from social.services.blocks import ensure_not_blocked
from social.services.errors import Forbidden, InvalidArgument
from social.services.results import ActionResult, service_action
from social.utils.uuid import canonical_pair

logger = logging.getLogger(__name__)


def get_or_create_conversation(user_a, user_b, status=Conversation.STATUS_REQUEST):
    """
    Return (conversation, created) for the pair, creating it when missing.

    An existing `request` conversation is upgraded when `status` is active;
    an active conversation is never downgraded.
    """
    id1, id2 = canonical_pair(user_a, user_b)
    conversation = Conversation.objects.filter(user1_id=id1, user2_id=id2).first()
    if conversation is None:
        try:
            with transaction.atomic():
                conversation = Conversation.objects.create(user1_id=id1, user2_id=id2, status=status)
            logger.info("Created conversation %s between %s and %s.", conversation.id, id1, id2)
            return conversation, True
        except IntegrityError:
            conversation = Conversation.objects.get(user1_id=id1, user2_id=id2)

    if status == Conversation.STATUS_ACTIVE and conversation.status != Conversation.STATUS_ACTIVE:
        activate_conversation(id1, id2)
        conversation.refresh_from_db()
    return conversation, False


def activate_conversation(user_a, user_b):
    """Upgrade a pending message request between the pair to active."""
    id1, id2 = canonical_pair(user_a, user_b)
    return Conversation.objects.filter(
        user1_id=id1, user2_id=id2, status=Conversation.STATUS_REQUEST
    ).update(status=Conversation.STATUS_ACTIVE)


class ConversationService(ActorService):
    """Expose conversation lookup to participants of the conversation."""

    @service_action("Failed to get or create conversation.")
    def get_or_create(self, user_id_1, user_id_2, status=Conversation.STATUS_REQUEST):
        actor_id = self._require_actor()
        if actor_id not in (user_id_1, user_id_2):
            raise Forbidden("You must be part of the conversation.")
        if user_id_1 == user_id_2:
            raise InvalidArgument("Cannot create a conversation with yourself.")
        self._require_user(user_id_1)
        self._require_user(user_id_2)
        ensure_not_blocked(user_id_1, user_id_2)
        conversation, created = get_or_create_conversation(user_id_1, user_id_2, status)
        message = "Conversation created successfully." if created else "Conversation retrieved successfully."
        return ActionResult.success(message, conversation)
