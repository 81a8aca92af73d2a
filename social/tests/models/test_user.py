from django.test import TestCase

from social.models import User
from social.tests.helpers import make_user


class UserModelTestCase(TestCase):
    def test_generated_identity_is_prefixed(self):
        user = User.objects.create_user(username="dora", password="Password123")
        self.assertTrue(user.pk.startswith("user_"))

    def test_soft_deleted_flag_follows_username_prefix(self):
        self.assertTrue(make_user("deleted_erin").is_soft_deleted)
        self.assertFalse(make_user("erin").is_soft_deleted)

    def test_answered_questions(self):
        self.assertFalse(make_user("frank").has_answered_questions)
        self.assertTrue(make_user("gina", travel_mood="spontaneous").has_answered_questions)

    def test_travel_preferences_default_to_empty_list(self):
        self.assertEqual(make_user("hana").travel_preferences, [])
