from rest_framework import serializers

from social.models import ActivityComment, Comment, Conversation, Follow, Itinerary, Match, Post, User


class ProfileSerializer(serializers.ModelSerializer):
    """Public profile fields; never exposes credentials or email."""

    class Meta:
        model = User
        fields = [
            "id",
            "username",
            "first_name",
            "last_name",
            "bio",
            "travel_preferences",
            "budget_preference",
            "travel_mood",
            "next_destination",
        ]
        read_only_fields = fields


class FollowSerializer(serializers.ModelSerializer):
    follower = ProfileSerializer(read_only=True)
    following = ProfileSerializer(read_only=True)

    class Meta:
        model = Follow
        fields = ["follower", "following", "status", "is_dismissed_by_follower", "created_at", "updated_at"]
        read_only_fields = fields


class MatchSerializer(serializers.ModelSerializer):
    user_id_1 = serializers.CharField(source="user1_id", read_only=True)
    user_id_2 = serializers.CharField(source="user2_id", read_only=True)
    initiated_by = serializers.CharField(source="initiated_by_id", read_only=True)

    class Meta:
        model = Match
        fields = [
            "id",
            "user_id_1",
            "user_id_2",
            "status",
            "initiated_by",
            "is_dismissed_by_user1",
            "is_dismissed_by_user2",
            "created_at",
            "updated_at",
        ]
        read_only_fields = fields


class ConversationSerializer(serializers.ModelSerializer):
    user_id_1 = serializers.CharField(source="user1_id", read_only=True)
    user_id_2 = serializers.CharField(source="user2_id", read_only=True)

    class Meta:
        model = Conversation
        fields = ["id", "user_id_1", "user_id_2", "status", "created_at", "updated_at"]
        read_only_fields = fields


class MatchOutcomeSerializer(serializers.Serializer):
    """Result of a right swipe."""
    status = serializers.CharField()
    is_new_match = serializers.BooleanField()
    match = MatchSerializer()
    conversation = ConversationSerializer(allow_null=True)


class ItinerarySerializer(serializers.ModelSerializer):
    class Meta:
        model = Itinerary
        fields = ["id", "creator", "title", "destination", "status", "like_count", "created_at"]
        read_only_fields = fields


class DiscoveryCardSerializer(serializers.Serializer):
    user = ProfileSerializer()
    match_percentage = serializers.IntegerField()
    completed_trips = ItinerarySerializer(many=True)


class PostSerializer(serializers.ModelSerializer):
    author = serializers.CharField(source="author_id", read_only=True)

    class Meta:
        model = Post
        fields = ["id", "author", "title", "content", "score", "created_at", "updated_at"]
        read_only_fields = ["id", "author", "score", "created_at", "updated_at"]


class CommentSerializer(serializers.ModelSerializer):
    author = serializers.CharField(source="author_id", read_only=True)
    post = serializers.UUIDField(source="post_id", read_only=True)
    parent = serializers.UUIDField(source="parent_id", read_only=True, allow_null=True)

    class Meta:
        model = Comment
        fields = ["id", "post", "author", "parent", "content", "score", "created_at"]
        read_only_fields = ["id", "post", "author", "parent", "score", "created_at"]


class ActivityCommentSerializer(serializers.ModelSerializer):
    user = serializers.CharField(source="user_id", read_only=True)
    event = serializers.UUIDField(source="event_id", read_only=True)
    parent = serializers.UUIDField(source="parent_id", read_only=True, allow_null=True)

    class Meta:
        model = ActivityComment
        fields = ["id", "event", "user", "parent", "content", "like_count", "reply_count", "created_at"]
        read_only_fields = ["id", "event", "user", "parent", "like_count", "reply_count", "created_at"]
