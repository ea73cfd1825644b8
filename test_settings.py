"""
These settings are here to use during tests, because django requires them.

In a real-world use case, the editables app is installed into another Django
project, so these settings will not be used.
"""

DATABASES = {
    "default": {
        "ENGINE": "django.db.backends.sqlite3",
        "NAME": "default.db",
        "USER": "",
        "PASSWORD": "",
        "HOST": "",
        "PORT": "",
    }
}

INSTALLED_APPS = [
    "django.contrib.auth",
    "django.contrib.contenttypes",
    "django.contrib.messages",
    "django.contrib.sessions",
    "django.contrib.staticfiles",
    # Admin
    "django.contrib.admin",
    # Our own apps
    "content_editables.apps.editables.apps.EditablesConfig",
]

SECRET_KEY = "insecure-secret-key"

USE_TZ = True

TIME_ZONE = "UTC"

LANGUAGE_CODE = "en-us"

STATIC_URL = "static/"

######################## CONTENT EDITABLES SETTINGS ########################

CONTENT_EDITABLES = {
    # Leave unset to use Django's script prefix.
    "APPLICATION_PATH": "/",
}
