import logging

from django.db import IntegrityError, transaction

from social.models import ActivityEvent, Follow
from social.repos.follows_repo import FollowsRepo
from social.services.activity import record_activity
from social.services.base import ActorService
from social.services.blocks import ensure_not_blocked
from social.services.conversations import activate_conversation
from social.services.errors import Conflict, InvalidArgument, NotFound
from social.services.follow_status import compute_follow_status
from social.services.results import ActionResult, service_action

logger = logging.getLogger(__name__)

REQUEST_DIRECTIONS = ("incoming", "outgoing")


class FollowService(ActorService):
    def __init__(self, actor=None, repo=None):
        super().__init__(actor)
        self.repo = repo or FollowsRepo()

    @service_action("Failed to send follow request.")
    @transaction.atomic
    def send_follow_request(self, follower_id, following_id):
        self._require_actor_is(follower_id)
        if follower_id == following_id:
            raise InvalidArgument("You cannot follow yourself.")
        self._require_user(following_id)
        ensure_not_blocked(follower_id, following_id, "You cannot follow this user.")

        existing = self.repo.edge(follower_id=follower_id, following_id=following_id)
        if existing:
            if existing.status == Follow.STATUS_PENDING:
                raise Conflict("Follow request already sent.")
            raise Conflict("You are already following this user.")

        incoming = self.repo.edge(follower_id=following_id, following_id=follower_id, for_update=True)
        if incoming and incoming.status == Follow.STATUS_ACCEPTED:
            raise Conflict("You are already following this user.")
        if incoming:
            # They already asked to follow us: treat our request as acceptance.
            logger.info("Found incoming request from %s; accepting automatically.", following_id)
            follow = self._accept(follower_id=following_id, following_id=follower_id)
            return ActionResult.success("Follow request accepted automatically.", follow)

        try:
            with transaction.atomic():
                follow = self.repo.create(
                    follower_id=follower_id,
                    following_id=following_id,
                    status=Follow.STATUS_PENDING,
                )
        except IntegrityError:
            raise Conflict("Follow request already sent.")
        logger.info("User %s requested to follow %s.", follower_id, following_id)
        return ActionResult.success("Follow request sent successfully.", follow)

    def _accept(self, *, follower_id, following_id):
        if not self.repo.accept(follower_id=follower_id, following_id=following_id):
            raise NotFound("Follow request not found or already actioned.")
        activate_conversation(follower_id, following_id)
        record_activity(follower_id, ActivityEvent.TYPE_FOLLOW, following_id, following_id)
        logger.info("User %s is now following %s.", follower_id, following_id)
        return self.repo.edge(follower_id=follower_id, following_id=following_id)

    @service_action("Failed to accept follow request.")
    @transaction.atomic
    def accept_follow_request(self, follower_id, following_id):
        self._require_actor_is(following_id)
        follow = self._accept(follower_id=follower_id, following_id=following_id)
        return ActionResult.success("Follow request accepted.", follow)

    @service_action("Failed to reject follow request.")
    @transaction.atomic
    def reject_follow_request(self, follower_id, following_id):
        self._require_actor_is(following_id, "Only the recipient of this request can reject it.")
        if not self.repo.delete_pending(follower_id=follower_id, following_id=following_id):
            raise NotFound("Follow request not found or already actioned.")
        return ActionResult.success("Follow request rejected.")

    @service_action("Failed to cancel follow request.")
    @transaction.atomic
    def cancel_follow_request(self, follower_id, following_id):
        self._require_actor_is(follower_id, "Only the sender of this request can cancel it.")
        if not self.repo.delete_pending(follower_id=follower_id, following_id=following_id):
            raise NotFound("No pending follow request found to cancel.")
        return ActionResult.success("Follow request cancelled.")

    @service_action("Failed to unfollow user.")
    @transaction.atomic
    def unfollow(self, follower_id, following_id):
        self._require_actor_is(follower_id)
        if not self.repo.delete_accepted_between(follower_id, following_id):
            raise NotFound("You are not following this user.")
        return ActionResult.success("User unfollowed successfully.")

    @service_action("Failed to get follow status.")
    def get_follow_status(self, viewer_id, target_id):
        """Return the status viewer_id sees on target_id's profile."""
        if not viewer_id:
            return ActionResult.success("Viewer not logged in.", compute_follow_status(None, target_id).value)
        if viewer_id == target_id:
            return ActionResult.success("Viewing own profile.", compute_follow_status(viewer_id, target_id).value)
        outgoing, incoming = self.repo.status_between(viewer_id, target_id)
        status = compute_follow_status(viewer_id, target_id, outgoing, incoming)
        return ActionResult.success("Follow status retrieved.", status.value)

    @service_action("Failed to get follow requests.")
    def follow_requests(self, user_id, direction):
        """List pending requests sent to (incoming) or by (outgoing) user_id."""
        self._require_actor_is(user_id)
        if direction not in REQUEST_DIRECTIONS:
            raise InvalidArgument("Direction must be 'incoming' or 'outgoing'.")
        requests = self.repo.pending_requests(user_id, direction)
        return ActionResult.success(f"{direction.capitalize()} follow requests retrieved.", requests)

    @service_action("Failed to get followers.")
    def followers(self, user_id):
        return ActionResult.success("Followers retrieved successfully.", list(self.repo.followers(user_id)))

    @service_action("Failed to get following list.")
    def following(self, user_id):
        return ActionResult.success("Following list retrieved successfully.", list(self.repo.following(user_id)))

    @service_action("Failed to get mutual followers.")
    def mutual_followers(self):
        actor_id = self._require_actor("Unauthorized: User not logged in.")
        mutuals = list(self.repo.mutuals(actor_id))
        logger.info("Found %s mutual followers for user %s.", len(mutuals), actor_id)
        return ActionResult.success("Mutual followers retrieved successfully.", mutuals)

    @service_action("Failed to dismiss follow notification.")
    def dismiss_follow_notification(self, follower_id, following_id):
        self._require_actor_is(follower_id, "You can only dismiss your own notifications.")
        updated = self.repo.update(
            {"follower_id": follower_id, "following_id": following_id, "status": Follow.STATUS_ACCEPTED},
            is_dismissed_by_follower=True,
        )
        if not updated:
            return ActionResult.success("Notification already dismissed or not found.")
        return ActionResult.success("Follow notification dismissed.")
