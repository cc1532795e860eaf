from django.apps import AppConfig


class MatchingConfig(AppConfig):
    """Django app config for the like/match engine."""
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'matching'
