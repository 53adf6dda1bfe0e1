from pathlib import Path

from environs import Env

env = Env()
env.read_env()

BASE_DIR = Path(__file__).resolve().parent.parent

SECRET_KEY = env.str("SECRET_KEY", "dev-insecure-key")
DEBUG = env.bool("DEBUG", False)
ALLOWED_HOSTS = env.list("ALLOWED_HOSTS", ["localhost", "127.0.0.1"])

INSTALLED_APPS = [
    "django.contrib.staticfiles",
    "recipe_search",
]

MIDDLEWARE = [
    "django.middleware.security.SecurityMiddleware",
    "django.middleware.common.CommonMiddleware",
]

ROOT_URLCONF = "recipe_assistant.urls"

TEMPLATES = [
    {
        "BACKEND": "django.template.backends.django.DjangoTemplates",
        "DIRS": [],
        "APP_DIRS": True,
        "OPTIONS": {"context_processors": ["django.template.context_processors.request"]},
    },
]

ASGI_APPLICATION = "recipe_assistant.asgi.application"

# No models; the cache backs memoized upstream health checks
DATABASES = {}
CACHES = {
    "default": {
        "BACKEND": "django.core.cache.backends.locmem.LocMemCache",
        "LOCATION": "recipe-assistant",
    }
}

LANGUAGE_CODE = "zh-hans"
TIME_ZONE = env.str("TIME_ZONE", "Asia/Shanghai")
USE_TZ = True

STATIC_URL = "static/"

# Cosmetic loading animation timings (seconds)
RECIPE_LOADING_STEP_INTERVAL = env.float("RECIPE_LOADING_STEP_INTERVAL", 0.8)
RECIPE_LOADING_TYPE_INTERVAL = env.float("RECIPE_LOADING_TYPE_INTERVAL", 0.03)
RECIPE_LOADING_MESSAGE_PAUSE = env.float("RECIPE_LOADING_MESSAGE_PAUSE", 1.5)

LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "simple": {"format": "%(asctime)s %(levelname)s %(name)s: %(message)s"},
    },
    "handlers": {
        "console": {"class": "logging.StreamHandler", "formatter": "simple"},
    },
    "loggers": {
        "recipe_search": {
            "handlers": ["console"],
            "level": env.str("RECIPE_LOG_LEVEL", "INFO"),
        },
    },
}
