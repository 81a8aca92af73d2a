"""
Forum models: Post, Comment, Vote

Post:
- A discussion thread opened by `author` with a `title` and `content`.
- `score` is a cached sum of the `value` of every Vote on the post.
- `is_hidden` lets admins hide content without deleting it.

Comment:
- A reply on a Post; `parent` links replies to another comment.
- Carries its own cached `score`, maintained the same way.

Vote:
- One row per user per post or per comment, never both.
- `value` is +1 (upvote) or -1 (downvote).
"""

import uuid
from django.conf import settings
from django.db import models
from django.db.models import Q


class Post(models.Model):
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    author = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name='forum_posts',
        db_column='user_id'
    )
    title = models.CharField(max_length=255)
    content = models.TextField(max_length=10000)
    score = models.IntegerField(default=0)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    is_hidden = models.BooleanField(default=False, help_text="Hidden by admin due to reports")

    class Meta:
        db_table = 'posts'
        ordering = ['-created_at']

    def __str__(self):
        return self.title


class Comment(models.Model):
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    post = models.ForeignKey(
        Post,
        on_delete=models.CASCADE,
        related_name='comments'
    )
    author = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name='forum_comments',
        db_column='user_id'
    )
    parent = models.ForeignKey(
        'self',
        on_delete=models.CASCADE,
        null=True,
        blank=True,
        related_name='replies'
    )
    content = models.TextField(max_length=2000)
    score = models.IntegerField(default=0)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    is_hidden = models.BooleanField(default=False, help_text="Hidden by admin due to reports")

    class Meta:
        db_table = 'comments'

    def __str__(self):
        return f"Comment by {self.author_id} on {self.post_id}"


class Vote(models.Model):
    UP = 1
    DOWN = -1

    VALUES = [
        (UP, "Upvote"),
        (DOWN, "Downvote"),
    ]

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name='votes'
    )
    post = models.ForeignKey(Post, null=True, blank=True, on_delete=models.CASCADE, related_name='votes')
    comment = models.ForeignKey(Comment, null=True, blank=True, on_delete=models.CASCADE, related_name='votes')
    value = models.SmallIntegerField(choices=VALUES)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'votes'
        constraints = [
            models.CheckConstraint(
                condition=(Q(post__isnull=False, comment__isnull=True) | Q(post__isnull=True, comment__isnull=False)),
                name='chk_votes_post_or_comment',
            ),
            models.CheckConstraint(condition=Q(value__in=[1, -1]), name='chk_votes_value'),
            models.UniqueConstraint(fields=['user', 'post'], name='uniq_votes_user_post'),
            models.UniqueConstraint(fields=['user', 'comment'], name='uniq_votes_user_comment'),
        ]

    def __str__(self):
        target = f"post {self.post_id}" if self.post_id else f"comment {self.comment_id}"
        return f"Vote({self.user_id}, {target}, {self.value:+d})"
