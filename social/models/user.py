"""Custom user model keyed by the externally issued identity."""

from django.contrib.auth.models import AbstractUser
from django.core.validators import MaxLengthValidator
from django.db import models

from social.utils.uuid import new_identity

DELETED_USERNAME_PREFIX = "deleted_"


class User(AbstractUser):
    """Traveller account; the primary key is the opaque identity string."""

    BUDGET_LOW = "low-range"
    BUDGET_MID = "mid-range"
    BUDGET_LUXURY = "luxury"

    BUDGET_CHOICES = [
        (BUDGET_LOW, "Low range"),
        (BUDGET_MID, "Mid range"),
        (BUDGET_LUXURY, "Luxury"),
    ]

    id = models.CharField(primary_key=True, max_length=64, default=new_identity, editable=False)
    bio = models.TextField(
        max_length=500,
        blank=True,
        help_text="short user bio shown on profile",
        validators=[MaxLengthValidator(500)]
    )
    # travel_preferences: stored as JSON (string array)
    travel_preferences = models.JSONField(default=list, blank=True)
    budget_preference = models.CharField(max_length=20, choices=BUDGET_CHOICES, blank=True)
    travel_mood = models.CharField(max_length=255, blank=True)
    next_destination = models.CharField(max_length=255, blank=True)
    profile_questions_completed = models.BooleanField(default=False)

    class Meta:
        """Default ordering for users."""
        ordering = ['username']

    def __str__(self):
        return self.username

    @property
    def is_soft_deleted(self):
        """True for accounts anonymised by account deletion."""
        return self.username.startswith(DELETED_USERNAME_PREFIX)

    @property
    def has_answered_questions(self):
        return bool(self.travel_mood or self.next_destination)
