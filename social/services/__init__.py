from .blocks import BlockService
from .conversations import ConversationService
from .engagement import EngagementService
from .follow import FollowService
from .forum import ForumService
from .matches import MatchService
from .results import ActionResult

__all__ = [
    "ActionResult",
    "BlockService",
    "ConversationService",
    "EngagementService",
    "FollowService",
    "ForumService",
    "MatchService",
]
