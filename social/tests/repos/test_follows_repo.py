from django.test import TestCase

from social.models import Follow
from social.repos.follows_repo import FollowsRepo
from social.tests.helpers import make_follow, make_user


class FollowsRepoTests(TestCase):
    def setUp(self):
        self.repo = FollowsRepo()
        self.alice = make_user("alice")
        self.bob = make_user("bob")

    def test_query_combines_filters_where_and_exclude(self):
        carol = make_user("carol")
        make_follow(self.alice, self.bob, status=Follow.STATUS_ACCEPTED)
        make_follow(carol, self.alice)
        qs = self.repo.query(
            filters={"following_id": self.alice.pk},
            exclude={"status": Follow.STATUS_ACCEPTED},
            order_by=("-created_at",),
        )
        self.assertEqual([f.follower_id for f in qs], [carol.pk])

    def test_edge_and_status_between(self):
        make_follow(self.alice, self.bob)
        self.assertEqual(self.repo.edge(follower_id=self.alice.pk, following_id=self.bob.pk).status, "pending")
        self.assertIsNone(self.repo.edge(follower_id=self.bob.pk, following_id=self.alice.pk))
        self.assertEqual(self.repo.status_between(self.bob.pk, self.alice.pk), (None, Follow.STATUS_PENDING))

    def test_ensure_accepted_inserts_missing_rows(self):
        self.repo.ensure_accepted(self.alice.pk, self.bob.pk)
        self.assertEqual(Follow.objects.filter(status=Follow.STATUS_ACCEPTED).count(), 2)

    def test_ensure_accepted_upgrades_pending_row(self):
        pending = make_follow(self.alice, self.bob)
        self.repo.ensure_accepted(self.bob.pk, self.alice.pk)
        pending.refresh_from_db()
        self.assertEqual(pending.status, Follow.STATUS_ACCEPTED)
        self.assertEqual(Follow.objects.count(), 2)

    def test_delete_accepted_between_leaves_pending_rows(self):
        make_follow(self.alice, self.bob, status=Follow.STATUS_ACCEPTED)
        make_follow(self.bob, self.alice)
        self.assertEqual(self.repo.delete_accepted_between(self.bob.pk, self.alice.pk), 1)
        self.assertEqual(Follow.objects.get().follower_id, self.bob.pk)

    def test_pending_requests_by_direction(self):
        make_follow(self.bob, self.alice)
        make_follow(make_user("deleted_ghost"), self.alice)
        incoming = self.repo.pending_requests(self.alice.pk, "incoming")
        self.assertEqual([f.follower_id for f in incoming], [self.bob.pk])
        self.assertEqual(self.repo.pending_requests(self.alice.pk, "outgoing"), [])
