from django.test import SimpleTestCase

from social.models import Follow
from social.services.follow_status import FollowStatus, compute_follow_status

PENDING = Follow.STATUS_PENDING
ACCEPTED = Follow.STATUS_ACCEPTED


class ComputeFollowStatusTestCase(SimpleTestCase):
    def test_self(self):
        self.assertEqual(compute_follow_status("a", "a", ACCEPTED, ACCEPTED), FollowStatus.SELF)

    def test_anonymous_viewer(self):
        self.assertEqual(compute_follow_status(None, "b", ACCEPTED), FollowStatus.NOT_FOLLOWING)
        self.assertEqual(compute_follow_status("", "b"), FollowStatus.NOT_FOLLOWING)

    def test_accepted_in_either_direction_is_following(self):
        self.assertEqual(compute_follow_status("a", "b", ACCEPTED, None), FollowStatus.FOLLOWING)
        self.assertEqual(compute_follow_status("a", "b", None, ACCEPTED), FollowStatus.FOLLOWING)
        self.assertEqual(compute_follow_status("a", "b", PENDING, ACCEPTED), FollowStatus.FOLLOWING)

    def test_pending_directions(self):
        self.assertEqual(compute_follow_status("a", "b", PENDING, None), FollowStatus.PENDING_OUTGOING)
        self.assertEqual(compute_follow_status("a", "b", None, PENDING), FollowStatus.PENDING_INCOMING)

    def test_no_rows(self):
        self.assertEqual(compute_follow_status("a", "b"), FollowStatus.NOT_FOLLOWING)

    def test_values_are_wire_strings(self):
        self.assertEqual(FollowStatus.PENDING_OUTGOING.value, "pending_outgoing")
        self.assertEqual(FollowStatus.FOLLOWING, "following")
