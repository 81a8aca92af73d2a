import uuid
from unittest import mock

from django.test import TestCase

from social.models import ActivityComment, ActivityCommentLike, ActivityEvent, Itinerary, ItineraryLike
from social.services import EngagementService
from social.services.engagement import decrement, increment
from social.tests.helpers import make_activity_comment, make_event, make_itinerary, make_user


class ToggleLikeTestCase(TestCase):
    def setUp(self):
        self.carol = make_user("carol")
        self.itinerary = make_itinerary(self.carol)
        self.service = EngagementService(self.carol)

    def test_like_then_unlike(self):
        liked = self.service.toggle_like(self.itinerary.pk, "itinerary")
        self.assertTrue(liked.is_success)
        self.assertEqual(liked.data, {"liked": True, "new_count": 1})

        unliked = self.service.toggle_like(self.itinerary.pk, "itinerary")
        self.assertEqual(unliked.data, {"liked": False, "new_count": 0})
        self.assertFalse(ItineraryLike.objects.exists())

    def test_count_matches_number_of_likers(self):
        users = [make_user(f"fan{i}") for i in range(5)]
        for user in users:
            EngagementService(user).toggle_like(self.itinerary.pk, "itinerary")
        EngagementService(users[0]).toggle_like(self.itinerary.pk, "itinerary")

        self.itinerary.refresh_from_db()
        self.assertEqual(self.itinerary.like_count, 4)
        self.assertEqual(ItineraryLike.objects.filter(itinerary=self.itinerary).count(), 4)

    def test_unlike_never_goes_below_zero(self):
        ItineraryLike.objects.create(user=self.carol, itinerary=self.itinerary)
        result = self.service.toggle_like(self.itinerary.pk, "itinerary")
        self.assertEqual(result.data, {"liked": False, "new_count": 0})

    def test_activity_event_and_comment_kinds(self):
        event = make_event(self.carol)
        comment = make_activity_comment(event, self.carol)

        self.assertEqual(self.service.toggle_like(event.pk, "activity_event").data["new_count"], 1)
        self.assertEqual(self.service.toggle_like(comment.pk, "activity_comment").data["new_count"], 1)
        self.assertTrue(ActivityCommentLike.objects.filter(user=self.carol, comment=comment).exists())

    def test_anonymous_unauthorized(self):
        result = EngagementService(None).toggle_like(self.itinerary.pk, "itinerary")
        self.assertEqual(result.error, "unauthorized")

    def test_unknown_kind_and_missing_id_invalid(self):
        self.assertEqual(self.service.toggle_like(self.itinerary.pk, "photo").error, "invalid_argument")
        self.assertEqual(self.service.toggle_like("", "itinerary").error, "invalid_argument")

    def test_missing_entity_not_found(self):
        result = self.service.toggle_like(uuid.uuid4(), "itinerary")
        self.assertEqual(result.error, "not_found")
        self.assertFalse(ItineraryLike.objects.exists())

    def test_counter_miss_rolls_back_like_row(self):
        with mock.patch("social.services.engagement.increment", return_value=0):
            result = self.service.toggle_like(self.itinerary.pk, "itinerary")
        self.assertEqual(result.error, "not_found")
        self.assertFalse(ItineraryLike.objects.exists())

    def test_is_liked(self):
        self.assertFalse(self.service.is_liked(self.itinerary.pk, "itinerary").data)
        self.service.toggle_like(self.itinerary.pk, "itinerary")
        self.assertTrue(self.service.is_liked(self.itinerary.pk, "itinerary").data)
        self.assertFalse(EngagementService(None).is_liked(self.itinerary.pk, "itinerary").data)

    def test_liked_itineraries_skip_soft_deleted_creators(self):
        ghost_trip = make_itinerary(make_user("deleted_ghost"), title="Ghost trip")
        self.service.toggle_like(self.itinerary.pk, "itinerary")
        self.service.toggle_like(ghost_trip.pk, "itinerary")
        self.assertEqual(self.service.liked_itineraries().data, [self.itinerary])


class ActivityCommentTestCase(TestCase):
    def setUp(self):
        self.alice = make_user("alice")
        self.bob = make_user("bob")
        self.event = make_event(self.alice)

    def test_top_level_comment_bumps_event_count(self):
        result = EngagementService(self.bob).create_activity_comment(self.event.pk, "  Have fun!  ")
        self.assertTrue(result.is_success)
        self.assertEqual(result.data.content, "Have fun!")
        self.event.refresh_from_db()
        self.assertEqual(self.event.comment_count, 1)

    def test_reply_bumps_parent_reply_count_only(self):
        parent = EngagementService(self.bob).create_activity_comment(self.event.pk, "Where to?").data
        EngagementService(self.alice).create_activity_comment(self.event.pk, "Kyoto!", parent.pk)

        parent.refresh_from_db()
        self.event.refresh_from_db()
        self.assertEqual(parent.reply_count, 1)
        self.assertEqual(self.event.comment_count, 1)

    def test_empty_content_invalid(self):
        result = EngagementService(self.bob).create_activity_comment(self.event.pk, "   ")
        self.assertEqual(result.error, "invalid_argument")

    def test_missing_event_or_parent_not_found(self):
        service = EngagementService(self.bob)
        self.assertEqual(service.create_activity_comment(uuid.uuid4(), "Hi").error, "not_found")
        self.assertEqual(service.create_activity_comment(self.event.pk, "Hi", uuid.uuid4()).error, "not_found")
        self.assertFalse(ActivityComment.objects.exists())

    def test_delete_decrements_counters(self):
        service = EngagementService(self.bob)
        parent = service.create_activity_comment(self.event.pk, "Where to?").data
        reply = service.create_activity_comment(self.event.pk, "Asking again", parent.pk).data

        self.assertTrue(service.delete_activity_comment(reply.pk).is_success)
        parent.refresh_from_db()
        self.assertEqual(parent.reply_count, 0)

        self.assertTrue(service.delete_activity_comment(parent.pk).is_success)
        self.event.refresh_from_db()
        self.assertEqual(self.event.comment_count, 0)

    def test_delete_floors_counter_at_zero(self):
        comment = make_activity_comment(self.event, self.bob)
        EngagementService(self.bob).delete_activity_comment(comment.pk)
        self.assertEqual(ActivityEvent.objects.get(pk=self.event.pk).comment_count, 0)

    def test_only_author_can_delete(self):
        comment = make_activity_comment(self.event, self.bob)
        result = EngagementService(self.alice).delete_activity_comment(comment.pk)
        self.assertEqual(result.error, "forbidden")
        self.assertTrue(ActivityComment.objects.filter(pk=comment.pk).exists())


class CounterHelpersTestCase(TestCase):
    def test_decrement_is_floored(self):
        itinerary = make_itinerary(make_user("dora"))
        self.assertEqual(decrement(Itinerary, itinerary.pk, "like_count"), 1)
        self.assertEqual(Itinerary.objects.get(pk=itinerary.pk).like_count, 0)
        increment(Itinerary, itinerary.pk, "like_count", by=2)
        self.assertEqual(Itinerary.objects.get(pk=itinerary.pk).like_count, 2)
