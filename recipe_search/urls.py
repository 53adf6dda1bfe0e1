from django.urls import path

from .views import health_view, search_stream_view, search_view, suggest_view

urlpatterns = [
    path("", search_view, name="search"),
    path("suggest/", suggest_view, name="search_suggest"),
    path("stream/", search_stream_view, name="search_stream"),
    path("health/", health_view, name="search_health"),
]
