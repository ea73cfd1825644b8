"""
test_settings.py with a MySQL backend instead of SQLite.

Detail names and item keys rely on a binary collation to stay case-sensitive,
and MySQL is the backend where that actually matters, so run the store tests
against it before changing anything in lib/fields.py:

    pytest --ds=mysql_test_settings

A compatible server can be started locally with:
docker run --rm \
    -e MYSQL_DATABASE=test_editables_db \
    -e MYSQL_USER=test_editables_user \
    -e MYSQL_PASSWORD=test_editables_pass \
    -e MYSQL_RANDOM_ROOT_PASSWORD=true \
    -p 3306:3306 mysql:8
"""

from test_settings import *  # pylint: disable=wildcard-import,unused-wildcard-import

DATABASES = {
    "default": {
        "ENGINE": "django.db.backends.mysql",
        "NAME": "test_editables_db",
        "USER": "test_editables_user",
        "PASSWORD": "test_editables_pass",
        "HOST": "127.0.0.1",
        "PORT": "3306",
        "OPTIONS": {
            "charset": "utf8mb4"
        }
    }
}
