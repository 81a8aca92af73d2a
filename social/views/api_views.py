"""JSON endpoints; each one delegates to a service and renders its ActionResult."""

from rest_framework import status
from rest_framework.decorators import api_view
from rest_framework.response import Response

from social.serializers import (
    ActivityCommentSerializer,
    CommentSerializer,
    DiscoveryCardSerializer,
    FollowSerializer,
    MatchOutcomeSerializer,
    PostSerializer,
    ProfileSerializer,
)
from social.services import (
    BlockService,
    EngagementService,
    FollowService,
    ForumService,
    MatchService,
)

ERROR_STATUS = {
    "unauthorized": status.HTTP_401_UNAUTHORIZED,
    "forbidden": status.HTTP_403_FORBIDDEN,
    "not_found": status.HTTP_404_NOT_FOUND,
    "invalid_argument": status.HTTP_400_BAD_REQUEST,
    "conflict": status.HTTP_409_CONFLICT,
    "internal": status.HTTP_500_INTERNAL_SERVER_ERROR,
}


def render_result(result, serializer_class=None, many=False, success_status=status.HTTP_200_OK):
    """Turn an ActionResult into a `{is_success, message, data}` response."""
    body = result.as_dict()
    if result.is_success and serializer_class is not None and result.data is not None:
        body["data"] = serializer_class(result.data, many=many).data
    code = success_status if result.is_success else ERROR_STATUS.get(result.error, status.HTTP_500_INTERNAL_SERVER_ERROR)
    return Response(body, status=code)


def bad_request(message):
    return Response({"is_success": False, "message": message, "data": None}, status=status.HTTP_400_BAD_REQUEST)


# --- relationships ---------------------------------------------------------

@api_view(['POST'])
def send_follow_request(request, following_id):
    result = FollowService(request.user).send_follow_request(request.user.pk, following_id)
    return render_result(result, FollowSerializer, success_status=status.HTTP_201_CREATED)


@api_view(['POST'])
def accept_follow_request(request, follower_id):
    result = FollowService(request.user).accept_follow_request(follower_id, request.user.pk)
    return render_result(result, FollowSerializer)


@api_view(['POST'])
def reject_follow_request(request, follower_id):
    return render_result(FollowService(request.user).reject_follow_request(follower_id, request.user.pk))


@api_view(['POST'])
def cancel_follow_request(request, following_id):
    return render_result(FollowService(request.user).cancel_follow_request(request.user.pk, following_id))


@api_view(['POST'])
def unfollow(request, following_id):
    return render_result(FollowService(request.user).unfollow(request.user.pk, following_id))


@api_view(['GET'])
def follow_status(request, target_id):
    return render_result(FollowService(request.user).get_follow_status(request.user.pk, target_id))


@api_view(['GET'])
def follow_requests(request):
    direction = request.query_params.get("direction", "incoming")
    result = FollowService(request.user).follow_requests(request.user.pk, direction)
    return render_result(result, FollowSerializer, many=True)


@api_view(['GET'])
def followers(request, user_id):
    return render_result(FollowService(request.user).followers(user_id), ProfileSerializer, many=True)


@api_view(['GET'])
def following(request, user_id):
    return render_result(FollowService(request.user).following(user_id), ProfileSerializer, many=True)


@api_view(['POST', 'DELETE'])
def block(request, blocked_id):
    """Block (POST) or unblock (DELETE) a user; `block_type` defaults to dm."""
    service = BlockService(request.user)
    block_type = request.data.get("block_type") or request.query_params.get("block_type") or "dm"
    if request.method == 'DELETE':
        return render_result(service.unblock_user(request.user.pk, blocked_id, block_type))
    return render_result(service.block_user(request.user.pk, blocked_id, block_type))


# --- matches -----------------------------------------------------------------

@api_view(['POST'])
def create_match(request, other_id):
    result = MatchService(request.user).create_match(request.user.pk, other_id, request.user.pk)
    return render_result(result, MatchOutcomeSerializer)


@api_view(['POST'])
def reject_match(request, other_id):
    return render_result(MatchService(request.user).reject_match(request.user.pk, other_id))


@api_view(['GET'])
def discover(request):
    try:
        offset = int(request.query_params.get("offset", 0))
        limit = request.query_params.get("limit")
        limit = int(limit) if limit is not None else None
    except ValueError:
        return bad_request("offset and limit must be integers.")
    result = MatchService(request.user).potential_matches(request.user.pk, offset=offset, limit=limit)
    return render_result(result, DiscoveryCardSerializer, many=True)


@api_view(['GET'])
def accepted_matches(request):
    return render_result(MatchService(request.user).accepted_matches(request.user.pk), ProfileSerializer, many=True)


# --- engagement --------------------------------------------------------------

@api_view(['POST'])
def toggle_like(request, kind, entity_id):
    return render_result(EngagementService(request.user).toggle_like(entity_id, kind))


@api_view(['POST'])
def create_activity_comment(request, event_id):
    result = EngagementService(request.user).create_activity_comment(
        event_id, request.data.get("content"), request.data.get("parent_id")
    )
    return render_result(result, ActivityCommentSerializer, success_status=status.HTTP_201_CREATED)


@api_view(['DELETE'])
def delete_activity_comment(request, comment_id):
    return render_result(EngagementService(request.user).delete_activity_comment(comment_id))


@api_view(['GET', 'POST'])
def posts(request):
    """List visible posts (GET, `?sort=score|created_at`) or open a new one (POST)."""
    service = ForumService(request.user)
    if request.method == 'GET':
        return render_result(service.posts(request.query_params.get("sort", "created_at")), PostSerializer, many=True)
    result = service.create_post(request.data.get("title"), request.data.get("content"))
    return render_result(result, PostSerializer, success_status=status.HTTP_201_CREATED)


@api_view(['POST'])
def create_comment(request, post_id):
    result = ForumService(request.user).create_comment(
        post_id, request.data.get("content"), request.data.get("parent_id")
    )
    return render_result(result, CommentSerializer, success_status=status.HTTP_201_CREATED)


@api_view(['POST'])
def vote(request, kind, votable_id):
    value = request.data.get("value")
    try:
        value = int(value)
    except (TypeError, ValueError):
        return bad_request("Vote value must be 1 or -1.")
    return render_result(ForumService(request.user).vote(votable_id, kind, value))
