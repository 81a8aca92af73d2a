from django.core.management.base import BaseCommand
from django.db import transaction

from social.models import User


class Command(BaseCommand):
    """
    Remove seeded data by deleting every non-staff user.

    Follows, blocks, matches, conversations, itineraries, likes and forum
    content cascade with their users; staff accounts are kept.
    """

    help = 'Removes seeded sample data'

    def handle(self, *args, **options):
        with transaction.atomic():
            users = User.objects.filter(is_staff=False)
            deleted_count = users.count()
            users.delete()
        self.stdout.write(self.style.SUCCESS(f"Deleted {deleted_count} non-staff users and related data."))
