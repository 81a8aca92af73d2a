from django.db import IntegrityError, transaction
from django.test import TestCase

from social.models import Comment, Vote
from social.tests.helpers import make_post, make_user


class VoteModelTestCase(TestCase):
    def setUp(self):
        self.alice = make_user("alice")
        self.post = make_post(self.alice)
        self.comment = Comment.objects.create(post=self.post, author=self.alice, content="Go in May.")

    def test_vote_needs_exactly_one_target(self):
        with self.assertRaises(IntegrityError):
            with transaction.atomic():
                Vote.objects.create(user=self.alice, value=Vote.UP)
        with self.assertRaises(IntegrityError):
            with transaction.atomic():
                Vote.objects.create(user=self.alice, post=self.post, comment=self.comment, value=Vote.UP)

    def test_value_must_be_plus_or_minus_one(self):
        with self.assertRaises(IntegrityError):
            with transaction.atomic():
                Vote.objects.create(user=self.alice, post=self.post, value=2)

    def test_one_vote_per_user_and_post(self):
        Vote.objects.create(user=self.alice, post=self.post, value=Vote.UP)
        with self.assertRaises(IntegrityError):
            with transaction.atomic():
                Vote.objects.create(user=self.alice, post=self.post, value=Vote.DOWN)

    def test_user_can_vote_on_post_and_its_comment(self):
        Vote.objects.create(user=self.alice, post=self.post, value=Vote.UP)
        Vote.objects.create(user=self.alice, comment=self.comment, value=Vote.DOWN)
        self.assertEqual(Vote.objects.count(), 2)

    def test_str_includes_signed_value(self):
        vote = Vote.objects.create(user=self.alice, post=self.post, value=Vote.DOWN)
        self.assertIn("-1", str(vote))
