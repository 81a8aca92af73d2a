"""Pure derivation of the follow status a viewer sees on a profile."""

from enum import Enum

from social.models.follow import Follow


class FollowStatus(str, Enum):
    NOT_FOLLOWING = "not_following"
    PENDING_OUTGOING = "pending_outgoing"
    PENDING_INCOMING = "pending_incoming"
    FOLLOWING = "following"
    SELF = "self"


def compute_follow_status(viewer_id, target_id, outgoing=None, incoming=None):
    """
    Derive the status from the two rows that can link viewer and target.

    `outgoing` is the status of the viewer -> target row and `incoming` the
    status of the target -> viewer row; None means the row does not exist.
    An accepted row in either direction counts as following for both users.
    """
    if not viewer_id:
        return FollowStatus.NOT_FOLLOWING
    if viewer_id == target_id:
        return FollowStatus.SELF
    if Follow.STATUS_ACCEPTED in (outgoing, incoming):
        return FollowStatus.FOLLOWING
    if outgoing == Follow.STATUS_PENDING:
        return FollowStatus.PENDING_OUTGOING
    if incoming == Follow.STATUS_PENDING:
        return FollowStatus.PENDING_INCOMING
    return FollowStatus.NOT_FOLLOWING
