"""Management command to seed the database with travellers and their social activity."""

from random import choice, random, randint, sample, seed as seed_random

from faker import Faker
from django.core.management.base import BaseCommand
from django.db import IntegrityError, transaction

from social.models import ActivityEvent, Itinerary, User
from social.services import EngagementService, FollowService, ForumService, MatchService
from social.services.activity import record_activity
from .seed_data import budget_preferences, travel_moods, travel_preferences_pool, user_fixtures


class Command(BaseCommand):
    """Seed users, then drive follows, matches, likes and forum activity through the services."""
    USER_COUNT = 40
    DEFAULT_PASSWORD = 'Password123'
    help = 'Seeds the database with sample data'

    def add_arguments(self, parser):
        parser.add_argument("--users", type=int, default=self.USER_COUNT, help="Total number of users to end up with.")
        parser.add_argument("--seed", type=int, default=None, help="Faker seed for reproducible data.")

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.faker = Faker('en_GB')

    def handle(self, *args, **options):
        """Run the full seeding sequence."""
        if options.get("seed") is not None:
            Faker.seed(options["seed"])
            seed_random(options["seed"])
        self.create_users(options["users"])
        users = list(User.objects.filter(is_staff=False))
        self.seed_follows(users)
        self.seed_matches(users)
        itineraries = self.seed_itineraries(users)
        self.seed_likes(users, itineraries)
        self.seed_forum(users)
        self.stdout.write(self.style.SUCCESS("Seeding complete"))

    def create_users(self, target):
        for data in user_fixtures:
            self.try_create_user(dict(data))
        attempts = 0
        while User.objects.count() < target and attempts < target * 3:
            attempts += 1
            self.try_create_user(self.random_user_data())

    def random_user_data(self):
        first_name = self.faker.first_name()
        last_name = self.faker.last_name()
        return {
            "username": f"{first_name}{last_name}{randint(1, 999)}".lower(),
            "email": f"{first_name}.{last_name}@example.org".lower(),
            "first_name": first_name,
            "last_name": last_name,
            "bio": self.faker.sentence(nb_words=12),
            "travel_preferences": sample(travel_preferences_pool, randint(0, 4)),
            "budget_preference": choice(budget_preferences + [""]),
        }

    def try_create_user(self, data):
        """Create a user, skipping usernames that are already taken."""
        try:
            with transaction.atomic():
                User.objects.create_user(
                    password=self.DEFAULT_PASSWORD,
                    travel_mood=choice(travel_moods),
                    next_destination=self.faker.city(),
                    profile_questions_completed=True,
                    **data,
                )
        except IntegrityError:
            self.stdout.write(f"Skipping duplicate user {data['username']}")

    def seed_follows(self, users, per_user=3):
        for user in users:
            service = FollowService(user)
            for target in sample(users, min(per_user, len(users))):
                if target.pk == user.pk:
                    continue
                result = service.send_follow_request(user.pk, target.pk)
                if result.is_success and random() < 0.6:
                    FollowService(target).accept_follow_request(user.pk, target.pk)

    def seed_matches(self, users, swipes=2):
        for user in users:
            for target in sample(users, min(swipes, len(users))):
                if target.pk == user.pk:
                    continue
                service = MatchService(user)
                if random() < 0.3:
                    service.reject_match(user.pk, target.pk)
                    continue
                service.create_match(user.pk, target.pk, user.pk)
                if random() < 0.5:
                    MatchService(target).create_match(target.pk, user.pk, target.pk)

    def seed_itineraries(self, users, per_user=2):
        itineraries = []
        for user in users:
            for _ in range(per_user):
                itinerary = Itinerary.objects.create(
                    creator=user,
                    title=f"{self.faker.city()} {choice(['escape', 'getaway', 'road trip', 'weekend'])}",
                    destination=self.faker.country(),
                    status=choice([Itinerary.STATUS_ACTIVE, Itinerary.STATUS_COMPLETED]),
                )
                record_activity(user.pk, ActivityEvent.TYPE_NEW_TRIP, itinerary.pk)
                itineraries.append(itinerary)
        return itineraries

    def seed_likes(self, users, itineraries, max_likes=5):
        events = list(ActivityEvent.objects.all())
        for user in users:
            service = EngagementService(user)
            for itinerary in sample(itineraries, min(randint(0, max_likes), len(itineraries))):
                service.toggle_like(itinerary.pk, "itinerary")
            for event in sample(events, min(randint(0, max_likes), len(events))):
                service.toggle_like(event.pk, "activity_event")
                if random() < 0.3:
                    service.create_activity_comment(event.pk, self.faker.sentence())

    def seed_forum(self, users, post_count=10):
        posts = []
        for _ in range(post_count):
            author = choice(users)
            result = ForumService(author).create_post(
                self.faker.sentence(nb_words=6).rstrip("."), self.faker.paragraph(nb_sentences=4)
            )
            if result.is_success:
                posts.append(result.data)
        for post in posts:
            for user in sample(users, min(randint(0, 5), len(users))):
                service = ForumService(user)
                service.vote(post.pk, "post", choice([1, 1, -1]))
                if random() < 0.4:
                    service.create_comment(post.pk, self.faker.sentence())
