import uuid

from social.models import (
    ActivityComment,
    ActivityEvent,
    Block,
    Follow,
    Itinerary,
    Match,
    Post,
    User,
)
from social.utils.uuid import canonical_pair


def make_user(username="alice", **kwargs):
    """Create a user whose id is `user_<username>` unless one is given."""
    kwargs.setdefault("id", f"user_{username}")
    email = kwargs.pop("email", f"{username}_{uuid.uuid4().hex[:6]}@example.org")
    password = kwargs.pop("password", "Password123")
    return User.objects.create_user(
        username=username,
        email=email,
        password=password,
        first_name=kwargs.pop("first_name", username.capitalize()),
        last_name=kwargs.pop("last_name", "Traveller"),
        **kwargs,
    )


def make_follow(follower, following, status=Follow.STATUS_PENDING):
    return Follow.objects.create(follower=follower, following=following, status=status)


def make_block(blocker, blocked, block_type=Block.TYPE_DM):
    return Block.objects.create(blocker=blocker, blocked=blocked, block_type=block_type)


def make_match(user_a, user_b, initiated_by=None, status=Match.STATUS_PENDING):
    id1, id2 = canonical_pair(user_a.pk, user_b.pk)
    return Match.objects.create(
        user1_id=id1,
        user2_id=id2,
        initiated_by=initiated_by or user_a,
        status=status,
    )


def make_itinerary(creator, title="Lisbon long weekend", **kwargs):
    return Itinerary.objects.create(creator=creator, title=title, **kwargs)


def make_event(user, event_type=ActivityEvent.TYPE_NEW_TRIP, **kwargs):
    return ActivityEvent.objects.create(user=user, event_type=event_type, **kwargs)


def make_activity_comment(event, user, content="Looks amazing!", **kwargs):
    return ActivityComment.objects.create(event=event, user=user, content=content, **kwargs)


def make_post(author, title="Best time to visit Porto?", content="Thinking about spring.", **kwargs):
    return Post.objects.create(author=author, title=title, content=content, **kwargs)
