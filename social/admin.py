from django.contrib import admin
from django.contrib.auth.admin import UserAdmin

from social.models import (
    ActivityComment,
    ActivityEvent,
    Block,
    Comment,
    Conversation,
    Follow,
    Itinerary,
    Match,
    Post,
    User,
)


@admin.register(User)
class TravellerAdmin(UserAdmin):
    """User admin extended with the travel profile fields used by discovery."""
    list_display = ('username', 'email', 'budget_preference', 'profile_questions_completed', 'is_staff')
    list_filter = UserAdmin.list_filter + ('profile_questions_completed', 'budget_preference')
    fieldsets = UserAdmin.fieldsets + (
        ('Travel profile', {
            'fields': (
                'bio',
                'travel_preferences',
                'budget_preference',
                'travel_mood',
                'next_destination',
                'profile_questions_completed',
            )
        }),
    )


@admin.register(Follow)
class FollowAdmin(admin.ModelAdmin):
    list_display = ('follower', 'following', 'status', 'created_at')
    list_filter = ('status',)
    search_fields = ('follower__username', 'following__username')


@admin.register(Block)
class BlockAdmin(admin.ModelAdmin):
    list_display = ('blocker', 'blocked', 'block_type', 'created_at')
    list_filter = ('block_type',)
    search_fields = ('blocker__username', 'blocked__username')


@admin.register(Match)
class MatchAdmin(admin.ModelAdmin):
    list_display = ('user1', 'user2', 'status', 'initiated_by', 'updated_at')
    list_filter = ('status',)
    search_fields = ('user1__username', 'user2__username')


@admin.register(Conversation)
class ConversationAdmin(admin.ModelAdmin):
    list_display = ('user1', 'user2', 'status', 'created_at')
    list_filter = ('status',)


@admin.register(Itinerary)
class ItineraryAdmin(admin.ModelAdmin):
    list_display = ('title', 'creator', 'status', 'like_count', 'is_archived')
    list_filter = ('status', 'is_archived')
    search_fields = ('title', 'destination', 'creator__username')
    readonly_fields = ('like_count',)


@admin.register(ActivityEvent)
class ActivityEventAdmin(admin.ModelAdmin):
    list_display = ('user', 'event_type', 'like_count', 'comment_count', 'created_at')
    list_filter = ('event_type',)
    readonly_fields = ('like_count', 'comment_count')


@admin.register(ActivityComment)
class ActivityCommentAdmin(admin.ModelAdmin):
    list_display = ('user', 'event', 'like_count', 'reply_count', 'created_at')
    readonly_fields = ('like_count', 'reply_count')


class ModerationMixin:
    """Hide/unhide actions shared by forum content admins."""
    actions = ['hide_content', 'approve_content']

    @admin.action(description='Hide selected items')
    def hide_content(self, request, queryset):
        """Mark selected items as hidden."""
        queryset.update(is_hidden=True)

    @admin.action(description='Approve selected items (Unhide)')
    def approve_content(self, request, queryset):
        """Unhide selected items."""
        queryset.update(is_hidden=False)


@admin.register(Post)
class PostAdmin(ModerationMixin, admin.ModelAdmin):
    """Admin configuration for forum posts with moderation actions."""
    list_display = ('title', 'author', 'score', 'created_at', 'is_hidden')
    list_filter = ('is_hidden', 'created_at')
    search_fields = ('title', 'content', 'author__username')
    readonly_fields = ('score',)


@admin.register(Comment)
class CommentAdmin(ModerationMixin, admin.ModelAdmin):
    """Admin configuration for forum comments with moderation actions."""
    list_display = ('short_text', 'author', 'post', 'score', 'is_hidden')
    list_filter = ('is_hidden', 'created_at')
    search_fields = ('content', 'author__username')
    readonly_fields = ('score',)

    def short_text(self, obj):
        """Shorten comment text for list display."""
        return obj.content[:50] + "..." if len(obj.content) > 50 else obj.content
