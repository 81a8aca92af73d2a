"""Shared plumbing for services that act on behalf of a user."""

from django.contrib.auth import get_user_model

from social.services.errors import Forbidden, NotFound, Unauthorized

User = get_user_model()


class ActorService:
    """Base for services constructed with the acting user (or None when anonymous)."""

    def __init__(self, actor=None):
        self.actor = actor

    @property
    def actor_id(self):
        if self.actor is None:
            return None
        if hasattr(self.actor, "is_authenticated"):
            if not self.actor.is_authenticated:
                return None
            return self.actor.pk
        return str(self.actor)

    def _require_actor(self, message=None):
        actor_id = self.actor_id
        if not actor_id:
            raise Unauthorized(message)
        return actor_id

    def _require_actor_is(self, user_id, message=None):
        """Raise Unauthorized when anonymous and Forbidden when the actor is not user_id."""
        actor_id = self._require_actor()
        if actor_id != user_id:
            raise Forbidden(message)
        return actor_id

    def _require_user(self, user_id, message="User not found."):
        user = User.objects.filter(pk=user_id).first()
        if user is None:
            raise NotFound(message)
        return user
