from django.db import IntegrityError, transaction
from django.test import TestCase

from social.models import Follow
from social.tests.helpers import make_follow, make_user


class FollowModelTestCase(TestCase):
    def setUp(self):
        self.alice = make_user("alice")
        self.bob = make_user("bob")

    def test_new_follow_defaults_to_pending(self):
        follow = Follow.objects.create(follower=self.alice, following=self.bob)
        self.assertEqual(follow.status, Follow.STATUS_PENDING)
        self.assertFalse(follow.is_dismissed_by_follower)

    def test_duplicate_follow_not_allowed(self):
        make_follow(self.alice, self.bob)
        with self.assertRaises(IntegrityError):
            make_follow(self.alice, self.bob)

    def test_reverse_direction_is_a_separate_row(self):
        make_follow(self.alice, self.bob)
        make_follow(self.bob, self.alice)
        self.assertEqual(Follow.objects.count(), 2)

    def test_self_follow_rejected_by_database(self):
        with self.assertRaises(IntegrityError):
            with transaction.atomic():
                make_follow(self.alice, self.alice)

    def test_related_names_cover_both_directions(self):
        make_follow(self.alice, self.bob, status=Follow.STATUS_ACCEPTED)
        self.assertEqual(self.alice.following_edges.count(), 1)
        self.assertEqual(self.bob.follower_edges.count(), 1)
