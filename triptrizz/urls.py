"""
URL configuration for the triptrizz project.

Every API route answers with `{is_success, message, data}`.
"""
from django.contrib import admin
from django.urls import path

from social.views import api_views

urlpatterns = [
    path('admin/', admin.site.urls),

    path('api/follows/<str:following_id>/request/', api_views.send_follow_request, name='send_follow_request'),
    path('api/follows/<str:follower_id>/accept/', api_views.accept_follow_request, name='accept_follow_request'),
    path('api/follows/<str:follower_id>/reject/', api_views.reject_follow_request, name='reject_follow_request'),
    path('api/follows/<str:following_id>/cancel/', api_views.cancel_follow_request, name='cancel_follow_request'),
    path('api/follows/<str:following_id>/unfollow/', api_views.unfollow, name='unfollow'),
    path('api/follows/<str:target_id>/status/', api_views.follow_status, name='follow_status'),
    path('api/follow-requests/', api_views.follow_requests, name='follow_requests'),
    path('api/users/<str:user_id>/followers/', api_views.followers, name='followers'),
    path('api/users/<str:user_id>/following/', api_views.following, name='following'),
    path('api/blocks/<str:blocked_id>/', api_views.block, name='block'),

    path('api/matches/', api_views.accepted_matches, name='accepted_matches'),
    path('api/matches/discover/', api_views.discover, name='discover'),
    path('api/matches/<str:other_id>/', api_views.create_match, name='create_match'),
    path('api/matches/<str:other_id>/reject/', api_views.reject_match, name='reject_match'),

    path('api/likes/<str:kind>/<str:entity_id>/', api_views.toggle_like, name='toggle_like'),
    path('api/activity/<str:event_id>/comments/', api_views.create_activity_comment, name='create_activity_comment'),
    path('api/activity-comments/<str:comment_id>/', api_views.delete_activity_comment, name='delete_activity_comment'),
    path('api/posts/', api_views.posts, name='posts'),
    path('api/posts/<str:post_id>/comments/', api_views.create_comment, name='create_comment'),
    path('api/votes/<str:kind>/<str:votable_id>/', api_views.vote, name='vote'),
]
