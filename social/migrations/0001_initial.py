import django.contrib.auth.models
import django.contrib.auth.validators
import django.core.validators
import django.db.models.deletion
import django.utils.timezone
import uuid
from django.conf import settings
from django.db import migrations, models

import social.utils.uuid


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ("auth", "0012_alter_user_first_name_max_length"),
    ]

    operations = [
        migrations.CreateModel(
            name="User",
            fields=[
                ("password", models.CharField(max_length=128, verbose_name="password")),
                ("last_login", models.DateTimeField(blank=True, null=True, verbose_name="last login")),
                ("is_superuser", models.BooleanField(default=False, help_text="Designates that this user has all permissions without explicitly assigning them.", verbose_name="superuser status")),
                ("username", models.CharField(error_messages={"unique": "A user with that username already exists."}, help_text="Required. 150 characters or fewer. Letters, digits and @/./+/-/_ only.", max_length=150, unique=True, validators=[django.contrib.auth.validators.UnicodeUsernameValidator()], verbose_name="username")),
                ("first_name", models.CharField(blank=True, max_length=150, verbose_name="first name")),
                ("last_name", models.CharField(blank=True, max_length=150, verbose_name="last name")),
                ("email", models.EmailField(blank=True, max_length=254, verbose_name="email address")),
                ("is_staff", models.BooleanField(default=False, help_text="Designates whether the user can log into this admin site.", verbose_name="staff status")),
                ("is_active", models.BooleanField(default=True, help_text="Designates whether this user should be treated as active. Unselect this instead of deleting accounts.", verbose_name="active")),
                ("date_joined", models.DateTimeField(default=django.utils.timezone.now, verbose_name="date joined")),
                ("id", models.CharField(default=social.utils.uuid.new_identity, editable=False, max_length=64, primary_key=True, serialize=False)),
                ("bio", models.TextField(blank=True, help_text="short user bio shown on profile", max_length=500, validators=[django.core.validators.MaxLengthValidator(500)])),
                ("travel_preferences", models.JSONField(blank=True, default=list)),
                ("budget_preference", models.CharField(blank=True, choices=[("low-range", "Low range"), ("mid-range", "Mid range"), ("luxury", "Luxury")], max_length=20)),
                ("travel_mood", models.CharField(blank=True, max_length=255)),
                ("next_destination", models.CharField(blank=True, max_length=255)),
                ("profile_questions_completed", models.BooleanField(default=False)),
                ("groups", models.ManyToManyField(blank=True, help_text="The groups this user belongs to. A user will get all permissions granted to each of their groups.", related_name="user_set", related_query_name="user", to="auth.group", verbose_name="groups")),
                ("user_permissions", models.ManyToManyField(blank=True, help_text="Specific permissions for this user.", related_name="user_set", related_query_name="user", to="auth.permission", verbose_name="user permissions")),
            ],
            options={
                "ordering": ["username"],
            },
            managers=[
                ("objects", django.contrib.auth.models.UserManager()),
            ],
        ),
        migrations.CreateModel(
            name="Follow",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("status", models.CharField(choices=[("pending", "Pending"), ("accepted", "Accepted")], default="pending", max_length=20)),
                ("is_dismissed_by_follower", models.BooleanField(default=False)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("follower", models.ForeignKey(db_column="follower_id", on_delete=django.db.models.deletion.CASCADE, related_name="following_edges", to=settings.AUTH_USER_MODEL)),
                ("following", models.ForeignKey(db_column="following_id", on_delete=django.db.models.deletion.CASCADE, related_name="follower_edges", to=settings.AUTH_USER_MODEL)),
            ],
            options={
                "db_table": "follows",
                "indexes": [models.Index(fields=["following", "status"], name="follows_following_status_idx")],
                "constraints": [
                    models.UniqueConstraint(fields=("follower", "following"), name="uniq_follows_follower_following"),
                    models.CheckConstraint(condition=models.Q(("follower", models.F("following")), _negated=True), name="chk_follows_not_self"),
                ],
            },
        ),
        migrations.CreateModel(
            name="Block",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("block_type", models.CharField(choices=[("dm", "Direct messages"), ("profile", "Profile")], default="dm", max_length=20)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("blocker", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="blocks_made", to=settings.AUTH_USER_MODEL)),
                ("blocked", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="blocks_received", to=settings.AUTH_USER_MODEL)),
            ],
            options={
                "db_table": "blocks",
                "constraints": [
                    models.UniqueConstraint(fields=("blocker", "blocked", "block_type"), name="uniq_blocks_blocker_blocked_type"),
                    models.CheckConstraint(condition=models.Q(("blocker", models.F("blocked")), _negated=True), name="chk_blocks_not_self"),
                ],
            },
        ),
        migrations.CreateModel(
            name="Match",
            fields=[
                ("id", models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ("status", models.CharField(choices=[("pending", "Pending"), ("accepted", "Accepted"), ("rejected", "Rejected")], default="pending", max_length=20)),
                ("is_dismissed_by_user1", models.BooleanField(default=False)),
                ("is_dismissed_by_user2", models.BooleanField(default=False)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("user1", models.ForeignKey(db_column="user_id_1", on_delete=django.db.models.deletion.CASCADE, related_name="+", to=settings.AUTH_USER_MODEL)),
                ("user2", models.ForeignKey(db_column="user_id_2", on_delete=django.db.models.deletion.CASCADE, related_name="+", to=settings.AUTH_USER_MODEL)),
                ("initiated_by", models.ForeignKey(db_column="initiated_by", on_delete=django.db.models.deletion.CASCADE, related_name="+", to=settings.AUTH_USER_MODEL)),
            ],
            options={
                "db_table": "matches",
                "constraints": [
                    models.UniqueConstraint(fields=("user1", "user2"), name="uniq_matches_user_pair"),
                    models.CheckConstraint(condition=models.Q(("user1__lt", models.F("user2"))), name="chk_matches_user_order"),
                ],
            },
        ),
        migrations.CreateModel(
            name="Conversation",
            fields=[
                ("id", models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ("status", models.CharField(choices=[("active", "Active"), ("request", "Request")], default="request", max_length=20)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("user1", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="+", to=settings.AUTH_USER_MODEL)),
                ("user2", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="+", to=settings.AUTH_USER_MODEL)),
            ],
            options={
                "db_table": "conversations",
                "constraints": [
                    models.UniqueConstraint(fields=("user1", "user2"), name="uniq_conversations_user_pair"),
                    models.CheckConstraint(condition=models.Q(("user1__lt", models.F("user2"))), name="chk_conversations_user_order"),
                ],
            },
        ),
        migrations.CreateModel(
            name="Itinerary",
            fields=[
                ("id", models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ("title", models.CharField(max_length=255)),
                ("destination", models.CharField(blank=True, max_length=255)),
                ("status", models.CharField(choices=[("draft", "Draft"), ("active", "Active"), ("completed", "Completed"), ("cancelled", "Cancelled")], default="draft", max_length=20)),
                ("is_archived", models.BooleanField(default=False)),
                ("like_count", models.PositiveIntegerField(default=0)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("creator", models.ForeignKey(db_column="creator_id", on_delete=django.db.models.deletion.CASCADE, related_name="itineraries", to=settings.AUTH_USER_MODEL)),
            ],
            options={
                "db_table": "itineraries",
            },
        ),
        migrations.CreateModel(
            name="ActivityEvent",
            fields=[
                ("id", models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ("event_type", models.CharField(choices=[("new_photo", "New photo"), ("new_trip", "New trip"), ("joined_trip", "Joined trip"), ("left_trip", "Left trip"), ("new_review", "New review"), ("follow", "Follow"), ("like_on_post", "Like on post"), ("comment_on_post", "Comment on post")], max_length=30)),
                ("related_id", models.CharField(blank=True, max_length=64)),
                ("like_count", models.PositiveIntegerField(default=0)),
                ("comment_count", models.PositiveIntegerField(default=0)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("user", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="activity_events", to=settings.AUTH_USER_MODEL)),
                ("target_user", models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.CASCADE, related_name="+", to=settings.AUTH_USER_MODEL)),
            ],
            options={
                "db_table": "activity_feed_events",
                "ordering": ["-created_at"],
            },
        ),
        migrations.CreateModel(
            name="ActivityComment",
            fields=[
                ("id", models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ("content", models.TextField(max_length=2000)),
                ("like_count", models.PositiveIntegerField(default=0)),
                ("reply_count", models.PositiveIntegerField(default=0)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("event", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="comments", to="social.activityevent")),
                ("user", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="activity_comments", to=settings.AUTH_USER_MODEL)),
                ("parent", models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.CASCADE, related_name="replies", to="social.activitycomment")),
            ],
            options={
                "db_table": "activity_feed_comments",
            },
        ),
        migrations.CreateModel(
            name="ItineraryLike",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("user", models.ForeignKey(db_column="user_id", on_delete=django.db.models.deletion.CASCADE, related_name="itinerary_likes", to=settings.AUTH_USER_MODEL)),
                ("itinerary", models.ForeignKey(db_column="itinerary_id", on_delete=django.db.models.deletion.CASCADE, related_name="likes", to="social.itinerary")),
            ],
            options={
                "db_table": "itinerary_likes",
                "constraints": [
                    models.UniqueConstraint(fields=("user", "itinerary"), name="uniq_itinerary_likes_user_itinerary"),
                ],
            },
        ),
        migrations.CreateModel(
            name="ActivityEventLike",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("user", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="activity_event_likes", to=settings.AUTH_USER_MODEL)),
                ("event", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="likes", to="social.activityevent")),
            ],
            options={
                "db_table": "activity_feed_likes",
                "constraints": [
                    models.UniqueConstraint(fields=("user", "event"), name="uniq_activity_feed_likes_user_event"),
                ],
            },
        ),
        migrations.CreateModel(
            name="ActivityCommentLike",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("user", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="activity_comment_likes", to=settings.AUTH_USER_MODEL)),
                ("comment", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="likes", to="social.activitycomment")),
            ],
            options={
                "db_table": "activity_feed_comment_likes",
                "constraints": [
                    models.UniqueConstraint(fields=("user", "comment"), name="uniq_activity_feed_comment_likes_user_comment"),
                ],
            },
        ),
        migrations.CreateModel(
            name="Post",
            fields=[
                ("id", models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ("title", models.CharField(max_length=255)),
                ("content", models.TextField(max_length=10000)),
                ("score", models.IntegerField(default=0)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("is_hidden", models.BooleanField(default=False, help_text="Hidden by admin due to reports")),
                ("author", models.ForeignKey(db_column="user_id", on_delete=django.db.models.deletion.CASCADE, related_name="forum_posts", to=settings.AUTH_USER_MODEL)),
            ],
            options={
                "db_table": "posts",
                "ordering": ["-created_at"],
            },
        ),
        migrations.CreateModel(
            name="Comment",
            fields=[
                ("id", models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ("content", models.TextField(max_length=2000)),
                ("score", models.IntegerField(default=0)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("is_hidden", models.BooleanField(default=False, help_text="Hidden by admin due to reports")),
                ("post", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="comments", to="social.post")),
                ("author", models.ForeignKey(db_column="user_id", on_delete=django.db.models.deletion.CASCADE, related_name="forum_comments", to=settings.AUTH_USER_MODEL)),
                ("parent", models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.CASCADE, related_name="replies", to="social.comment")),
            ],
            options={
                "db_table": "comments",
            },
        ),
        migrations.CreateModel(
            name="Vote",
            fields=[
                ("id", models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ("value", models.SmallIntegerField(choices=[(1, "Upvote"), (-1, "Downvote")])),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("user", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="votes", to=settings.AUTH_USER_MODEL)),
                ("post", models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.CASCADE, related_name="votes", to="social.post")),
                ("comment", models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.CASCADE, related_name="votes", to="social.comment")),
            ],
            options={
                "db_table": "votes",
                "constraints": [
                    models.CheckConstraint(condition=models.Q(models.Q(("comment__isnull", True), ("post__isnull", False)), models.Q(("comment__isnull", False), ("post__isnull", True)), _connector="OR"), name="chk_votes_post_or_comment"),
                    models.CheckConstraint(condition=models.Q(("value__in", [1, -1])), name="chk_votes_value"),
                    models.UniqueConstraint(fields=("user", "post"), name="uniq_votes_user_post"),
                    models.UniqueConstraint(fields=("user", "comment"), name="uniq_votes_user_comment"),
                ],
            },
        ),
    ]
