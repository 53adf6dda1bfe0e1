from django.apps import AppConfig


class RecipeSearchConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "recipe_search"
