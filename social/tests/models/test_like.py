from django.db import IntegrityError
from django.test import TestCase

from social.models import ItineraryLike
from social.tests.helpers import make_itinerary, make_user


class ItineraryLikeModelTestCase(TestCase):
    def setUp(self):
        self.alice = make_user("alice")
        self.itinerary = make_itinerary(self.alice)

    def test_like_count_starts_at_zero(self):
        self.assertEqual(self.itinerary.like_count, 0)

    def test_duplicate_like_not_allowed(self):
        ItineraryLike.objects.create(user=self.alice, itinerary=self.itinerary)
        with self.assertRaises(IntegrityError):
            ItineraryLike.objects.create(user=self.alice, itinerary=self.itinerary)
