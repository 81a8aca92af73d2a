from django.test import TestCase

from social.models import Conversation
from social.services import ConversationService
from social.services.conversations import activate_conversation, get_or_create_conversation
from social.tests.helpers import make_block, make_user


class ConversationProvisioningTestCase(TestCase):
    def setUp(self):
        self.alice = make_user("alice")
        self.bob = make_user("bob")

    def test_get_or_create_is_keyed_by_canonical_pair(self):
        first, created = get_or_create_conversation(self.bob.pk, self.alice.pk)
        second, created_again = get_or_create_conversation(self.alice.pk, self.bob.pk)
        self.assertTrue(created)
        self.assertFalse(created_again)
        self.assertEqual(first.pk, second.pk)
        self.assertEqual(first.user1_id, self.alice.pk)

    def test_active_request_upgrades_but_never_downgrades(self):
        get_or_create_conversation(self.alice.pk, self.bob.pk)
        conversation, _ = get_or_create_conversation(self.alice.pk, self.bob.pk, Conversation.STATUS_ACTIVE)
        self.assertEqual(conversation.status, Conversation.STATUS_ACTIVE)
        conversation, _ = get_or_create_conversation(self.alice.pk, self.bob.pk, Conversation.STATUS_REQUEST)
        self.assertEqual(conversation.status, Conversation.STATUS_ACTIVE)

    def test_activate_only_touches_existing_requests(self):
        self.assertEqual(activate_conversation(self.alice.pk, self.bob.pk), 0)
        self.assertFalse(Conversation.objects.exists())


class ConversationServiceTestCase(TestCase):
    def setUp(self):
        self.alice = make_user("alice")
        self.bob = make_user("bob")

    def test_participant_can_open_conversation(self):
        result = ConversationService(self.alice).get_or_create(self.alice.pk, self.bob.pk)
        self.assertTrue(result.is_success)
        self.assertEqual(result.message, "Conversation created successfully.")
        again = ConversationService(self.bob).get_or_create(self.bob.pk, self.alice.pk)
        self.assertEqual(again.message, "Conversation retrieved successfully.")

    def test_outsider_forbidden(self):
        carol = make_user("carol")
        result = ConversationService(carol).get_or_create(self.alice.pk, self.bob.pk)
        self.assertEqual(result.error, "forbidden")

    def test_self_conversation_invalid(self):
        result = ConversationService(self.alice).get_or_create(self.alice.pk, self.alice.pk)
        self.assertEqual(result.error, "invalid_argument")

    def test_blocked_pair_forbidden(self):
        make_block(self.bob, self.alice)
        result = ConversationService(self.alice).get_or_create(self.alice.pk, self.bob.pk)
        self.assertEqual(result.error, "forbidden")
        self.assertFalse(Conversation.objects.exists())
