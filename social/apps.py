from django.apps import AppConfig


class SocialConfig(AppConfig):
    """Django app config for the social core (relationships, matches, engagement)."""
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'social'
