from django.urls import include, path

urlpatterns = [
    path("", include("recipe_search.urls")),
]
