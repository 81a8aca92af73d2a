import logging

from django.db import IntegrityError, transaction
from django.db.models import Count, F, Q

from social.models import Comment, Post, Vote
from social.models.user import DELETED_USERNAME_PREFIX
from social.services.base import ActorService
from social.services.errors import Conflict, InvalidArgument, NotFound
from social.services.results import ActionResult, service_action
from social.utils.uuid import parse_uuid

logger = logging.getLogger(__name__)

VOTABLE_MODELS = {"post": Post, "comment": Comment}
POST_ORDERINGS = {"score": ("-score", "-created_at"), "created_at": ("-created_at",)}


class ForumService(ActorService):
    """Forum posts, comments and votes; every score write shares its vote's transaction."""

    @service_action("Failed to create post.")
    @transaction.atomic
    def create_post(self, title, content):
        actor_id = self._require_actor("You must be logged in to create a post.")
        title, content = (title or "").strip(), (content or "").strip()
        if not title or not content:
            raise InvalidArgument("Title and content are required.")
        post = Post.objects.create(author_id=actor_id, title=title, content=content, score=1)
        Vote.objects.create(user_id=actor_id, post=post, value=Vote.UP)
        logger.info("User %s created post %s.", actor_id, post.pk)
        return ActionResult.success("Post created successfully.", post)

    @service_action("Failed to create comment.")
    @transaction.atomic
    def create_comment(self, post_id, content, parent_id=None):
        actor_id = self._require_actor("You must be logged in to comment.")
        content = (content or "").strip()
        if not content:
            raise InvalidArgument("Comment content is required.")
        post_pk = parse_uuid(post_id)
        if post_pk is None or not Post.objects.filter(pk=post_pk).exists():
            raise NotFound("Post not found.")
        parent = None
        if parent_id:
            parent_pk = parse_uuid(parent_id)
            parent = Comment.objects.filter(pk=parent_pk, post_id=post_pk).first() if parent_pk else None
            if parent is None:
                raise NotFound("Parent comment not found.")

        comment = Comment.objects.create(
            post_id=post_pk, author_id=actor_id, parent=parent, content=content, score=1
        )
        Vote.objects.create(user_id=actor_id, comment=comment, value=Vote.UP)
        return ActionResult.success("Comment created successfully.", comment)

    @service_action("An unexpected error occurred while casting your vote.")
    @transaction.atomic
    def vote(self, votable_id, votable_kind, value):
        """
        Cast, flip or withdraw the actor's vote and return `{new_score, user_vote}`.

        Repeating the same value withdraws the vote; `user_vote` is then None.
        """
        actor_id = self._require_actor("You must be logged in to vote.")
        model = VOTABLE_MODELS.get(votable_kind)
        if model is None:
            raise InvalidArgument("Votes can only be cast on posts or comments.")
        if value not in (Vote.UP, Vote.DOWN):
            raise InvalidArgument("Vote value must be 1 or -1.")
        pk = parse_uuid(votable_id)
        item = model.objects.select_for_update().filter(pk=pk).first() if pk else None
        if item is None:
            raise NotFound(f"{votable_kind.capitalize()} not found.")

        existing = Vote.objects.filter(user_id=actor_id, **{votable_kind: item}).first()
        if existing is None:
            change, user_vote = value, value
            try:
                with transaction.atomic():
                    Vote.objects.create(user_id=actor_id, value=value, **{votable_kind: item})
            except IntegrityError:
                raise Conflict("Your vote is already being recorded. Please try again.")
        elif existing.value == value:
            change, user_vote = -value, None
            existing.delete()
        else:
            change, user_vote = 2 * value, value
            existing.value = value
            existing.save(update_fields=["value", "updated_at"])

        model.objects.filter(pk=item.pk).update(score=F("score") + change)
        new_score = model.objects.values_list("score", flat=True).get(pk=item.pk)
        return ActionResult.success("Vote cast successfully.", {"new_score": new_score, "user_vote": user_vote})

    @service_action("Failed to retrieve posts.")
    def posts(self, sort_by="created_at"):
        """Visible posts with their comment counts, best or newest first."""
        ordering = POST_ORDERINGS.get(sort_by)
        if ordering is None:
            raise InvalidArgument("Posts can be sorted by 'score' or 'created_at'.")
        qs = (
            Post.objects.filter(is_hidden=False)
            .exclude(author__username__startswith=DELETED_USERNAME_PREFIX)
            .select_related("author")
            .annotate(comment_count=Count("comments", filter=Q(comments__is_hidden=False)))
            .order_by(*ordering)
        )
        return ActionResult.success("Posts retrieved successfully.", list(qs))
