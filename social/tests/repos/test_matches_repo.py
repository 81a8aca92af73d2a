from django.test import TestCase

from social.models import Match
from social.repos.matches_repo import MatchesRepo
from social.tests.helpers import make_match, make_user


class MatchesRepoTests(TestCase):
    def setUp(self):
        self.repo = MatchesRepo()
        self.alice = make_user("alice")
        self.bob = make_user("bob")

    def test_for_pair_ignores_argument_order(self):
        match = make_match(self.bob, self.alice)
        self.assertEqual(self.repo.for_pair(self.bob.pk, self.alice.pk), match)
        self.assertEqual(self.repo.for_pair(self.alice.pk, self.bob.pk, for_update=True), match)

    def test_lock_or_create_pending(self):
        match, created = self.repo.lock_or_create_pending(self.bob.pk, self.alice.pk, self.bob.pk)
        self.assertTrue(created)
        self.assertEqual((match.user1_id, match.user2_id), (self.alice.pk, self.bob.pk))
        again, created = self.repo.lock_or_create_pending(self.alice.pk, self.bob.pk, self.alice.pk)
        self.assertFalse(created)
        self.assertEqual(again.pk, match.pk)

    def test_accept_pending_only_by_other_party(self):
        match = make_match(self.alice, self.bob, initiated_by=self.alice)
        self.assertEqual(self.repo.accept_pending(match, self.alice.pk), 0)
        self.assertEqual(self.repo.accept_pending(match, self.bob.pk), 1)
        match.refresh_from_db()
        self.assertEqual(match.status, Match.STATUS_ACCEPTED)

    def test_for_user_and_accepted_partners(self):
        carol = make_user("carol")
        make_match(self.alice, self.bob, status=Match.STATUS_ACCEPTED)
        make_match(carol, self.alice)
        self.assertEqual(self.repo.for_user(self.alice.pk).count(), 2)
        self.assertEqual(self.repo.accepted_partner_ids(self.alice.pk), {self.bob.pk})
