from django.apps import AppConfig

class CookbookConfig(AppConfig):
    """Django app config for the recipe-sharing backend."""
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'cookbook'
