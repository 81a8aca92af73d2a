from .user import User
from .follow import Follow
from .block import Block
from .match import Match
from .conversation import Conversation
from .itinerary import Itinerary
from .activity import ActivityEvent, ActivityComment
from .like import ItineraryLike, ActivityEventLike, ActivityCommentLike
from .forum import Post, Comment, Vote

__all__ = [
    "User",
    "Follow",
    "Block",
    "Match",
    "Conversation",
    "Itinerary",
    "ActivityEvent",
    "ActivityComment",
    "ItineraryLike",
    "ActivityEventLike",
    "ActivityCommentLike",
    "Post",
    "Comment",
    "Vote",
]
