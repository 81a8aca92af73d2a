from django.test import TestCase

from social.models import Block
from social.services import BlockService
from social.services.blocks import is_blocked
from social.tests.helpers import make_block, make_user


class BlockServiceTestCase(TestCase):
    def setUp(self):
        self.alice = make_user("alice")
        self.bob = make_user("bob")
        self.service = BlockService(self.alice)

    def test_block_creates_row(self):
        result = self.service.block_user(self.alice.pk, self.bob.pk)
        self.assertTrue(result.is_success)
        self.assertTrue(Block.objects.filter(blocker=self.alice, blocked=self.bob, block_type="dm").exists())

    def test_block_is_idempotent(self):
        self.service.block_user(self.alice.pk, self.bob.pk)
        result = self.service.block_user(self.alice.pk, self.bob.pk)
        self.assertTrue(result.is_success)
        self.assertEqual(Block.objects.count(), 1)

    def test_block_types_are_independent(self):
        self.service.block_user(self.alice.pk, self.bob.pk, "dm")
        self.service.block_user(self.alice.pk, self.bob.pk, "profile")
        self.assertEqual(Block.objects.count(), 2)

    def test_self_block_invalid(self):
        result = self.service.block_user(self.alice.pk, self.alice.pk)
        self.assertEqual(result.error, "invalid_argument")

    def test_unknown_block_type_invalid(self):
        result = self.service.block_user(self.alice.pk, self.bob.pk, "everything")
        self.assertEqual(result.error, "invalid_argument")

    def test_only_blocker_can_block(self):
        result = BlockService(self.bob).block_user(self.alice.pk, self.bob.pk)
        self.assertEqual(result.error, "forbidden")

    def test_unblock_removes_row_and_is_idempotent(self):
        make_block(self.alice, self.bob)
        self.assertTrue(self.service.unblock_user(self.alice.pk, self.bob.pk).is_success)
        self.assertFalse(Block.objects.exists())
        self.assertTrue(self.service.unblock_user(self.alice.pk, self.bob.pk).is_success)

    def test_is_blocked_checks_both_directions(self):
        make_block(self.bob, self.alice, Block.TYPE_PROFILE)
        self.assertTrue(is_blocked(self.alice.pk, self.bob.pk))
        self.assertTrue(is_blocked(self.bob.pk, self.alice.pk))
        self.assertTrue(is_blocked(self.alice.pk, self.bob.pk, Block.TYPE_PROFILE))
        self.assertFalse(is_blocked(self.alice.pk, self.bob.pk, Block.TYPE_DM))

    def test_block_status(self):
        make_block(self.bob, self.alice)
        self.assertTrue(self.service.block_status(self.bob.pk).data)
        self.assertFalse(self.service.block_status(self.alice.pk).data)
