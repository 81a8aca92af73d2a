"""Service helpers for blocking and unblocking users."""

import logging

from django.db import IntegrityError, transaction
from django.db.models import Q

from social.models import Block
from social.services.base import ActorService
from social.services.errors import Forbidden, InvalidArgument
from social.services.results import ActionResult, service_action

logger = logging.getLogger(__name__)

BLOCK_TYPES = {value for value, _ in Block.TYPES}


def is_blocked(user_a, user_b, block_type=None):
    """Return True when either user has blocked the other."""
    pair = Q(blocker_id=user_a, blocked_id=user_b) | Q(blocker_id=user_b, blocked_id=user_a)
    qs = Block.objects.filter(pair)
    if block_type:
        qs = qs.filter(block_type=block_type)
    return qs.exists()


def ensure_not_blocked(user_a, user_b, message="This user is blocked or has blocked you."):
    """Raise Forbidden when a block exists in either direction."""
    if is_blocked(user_a, user_b):
        raise Forbidden(message)


class BlockService(ActorService):
    """Encapsulate block creation and removal for the acting user."""

    def _validate(self, blocker_id, blocked_id, block_type):
        self._require_actor_is(blocker_id)
        if blocker_id == blocked_id:
            raise InvalidArgument("Cannot block yourself.")
        if block_type not in BLOCK_TYPES:
            raise InvalidArgument("Invalid block type specified.")

    @service_action("Failed to block user.")
    def block_user(self, blocker_id, blocked_id, block_type=Block.TYPE_DM):
        """Block blocked_id; repeating the call is a no-op."""
        self._validate(blocker_id, blocked_id, block_type)
        self._require_user(blocked_id)
        try:
            with transaction.atomic():
                Block.objects.get_or_create(
                    blocker_id=blocker_id, blocked_id=blocked_id, block_type=block_type
                )
        except IntegrityError:
            # a concurrent identical insert won; the row exists either way
            pass
        logger.info("User %s blocked user %s for type %s.", blocker_id, blocked_id, block_type)
        return ActionResult.success("User blocked successfully.")

    @service_action("Failed to unblock user.")
    def unblock_user(self, blocker_id, blocked_id, block_type=Block.TYPE_DM):
        """Remove a block; removing a missing block succeeds."""
        self._validate(blocker_id, blocked_id, block_type)
        Block.objects.filter(
            blocker_id=blocker_id, blocked_id=blocked_id, block_type=block_type
        ).delete()
        logger.info("User %s unblocked user %s for type %s.", blocker_id, blocked_id, block_type)
        return ActionResult.success("User unblocked successfully.")

    @service_action("Failed to check block status.")
    def block_status(self, other_id, block_type=None):
        """Report whether the actor and other_id are separated by a block."""
        actor_id = self._require_actor()
        if actor_id == other_id:
            return ActionResult.success("Cannot block self.", False)
        return ActionResult.success("Block status checked.", is_blocked(actor_id, other_id, block_type))
