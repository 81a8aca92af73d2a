from django.db import DatabaseError
from django.test import SimpleTestCase

from social.services.errors import Conflict, NotFound
from social.services.results import ActionResult, service_action


class Thing:
    @service_action("Failed to do the thing.")
    def run(self, exc=None):
        if exc is not None:
            raise exc
        return ActionResult.success("Done.", 42)


class ServiceActionTestCase(SimpleTestCase):
    def test_success_passes_through(self):
        result = Thing().run()
        self.assertTrue(result.is_success)
        self.assertEqual(result.data, 42)
        self.assertIsNone(result.error)

    def test_service_error_keeps_kind_and_message(self):
        result = Thing().run(Conflict("Already there."))
        self.assertFalse(result.is_success)
        self.assertEqual(result.error, "conflict")
        self.assertEqual(result.message, "Already there.")

    def test_default_message(self):
        self.assertEqual(Thing().run(NotFound()).message, "Not found.")

    def test_database_error_becomes_internal(self):
        with self.assertLogs("social.services.results", level="ERROR"):
            result = Thing().run(DatabaseError("disk full"))
        self.assertEqual(result.error, "internal")
        self.assertEqual(result.message, "Failed to do the thing.")

    def test_as_dict_shape(self):
        self.assertEqual(
            ActionResult.failure("Nope.", error="forbidden").as_dict(),
            {"is_success": False, "message": "Nope.", "data": None},
        )
