"""
Tests for the path helpers used by URL editables.
"""
import ddt  # type: ignore[import]
import pytest
from django.test import SimpleTestCase, override_settings
from django.urls import set_script_prefix

from content_editables.apps.editables import paths
from content_editables.apps.editables.exceptions import InvalidPath


@ddt.ddt
class RebaseTestCase(SimpleTestCase):
    """
    Tests for paths.rebase
    """

    @ddt.data(
        # Under the old root
        ("/app/old/page", "/app/old", "/app/new", "/app/new/page"),
        ("/app/old/page", "/app/old/", "/app/new/", "/app/new/page"),
        ("/app/old/a/b/c.pdf", "/app/old", "/app/new", "/app/new/a/b/c.pdf"),
        ("/app/old", "/app/old", "/app/new", "/app/new"),
        ("/app/old?page=2", "/app/old", "/app/new", "/app/new?page=2"),
        ("/app/old#top", "/app/old", "/app/new", "/app/new#top"),
        # Moving to and from the server root
        ("/page", "/", "/app/", "/app/page"),
        ("/app/page", "/app/", "/", "/page"),
        ("/app", "/app", "/", "/"),
        # Relative paths don't depend on the root
        ("relative/page", "/app/old", "/app/new", "relative/page"),
        ("~/page", "/app/old", "/app/new", "~/page"),
        ("../page", "/app/old", "/app/new", "../page"),
        # Absolute paths outside the old root
        ("/other/page", "/app/old", "/app/new", "/other/page"),
        ("/app/older/page", "/app/old", "/app/new", "/app/older/page"),
        # External URLs
        ("https://example.com/app/old/page", "/app/old", "/app/new", "https://example.com/app/old/page"),
        ("//cdn.example.com/app/old/page", "/app/old", "/app/new", "//cdn.example.com/app/old/page"),
        # Nothing stored
        (None, "/app/old", "/app/new", None),
        ("", "/app/old", "/app/new", ""),
    )
    @ddt.unpack
    def test_rebase(self, current_path, from_app_path, to_app_path, expected):
        assert paths.rebase(current_path, from_app_path, to_app_path) == expected

    def test_rebase_is_not_remembered(self):
        """
        Rebasing twice rewrites twice when the result is still under the old
        root, so moves must rebase exactly once.
        """
        once = paths.rebase("/app/page", "/app", "/app/app")
        assert once == "/app/app/page"
        assert paths.rebase(once, "/app", "/app/app") == "/app/app/app/page"

    @ddt.data(
        ("app/old", "/app/new"),
        ("/app/old", "app/new"),
        ("", "/app/new"),
        ("/app/old", "https://example.com/app/"),
        ("//example.com/app", "/app/new"),
        ("/app/ old", "/app/new"),
        ("/app\\old", "/app/new"),
        (None, "/app/new"),
    )
    @ddt.unpack
    def test_invalid_roots(self, from_app_path, to_app_path):
        with pytest.raises(InvalidPath) as exc_info:
            paths.rebase("/app/old/page", from_app_path, to_app_path)
        assert exc_info.value.path in (from_app_path, to_app_path)

    def test_invalid_root_is_reported_even_for_relative_paths(self):
        with pytest.raises(InvalidPath, match="app/old"):
            paths.rebase("relative/page", "app/old", "/app/new")


@ddt.ddt
class RelativityTestCase(SimpleTestCase):
    """
    Tests for converting between absolute and app-relative paths.
    """

    @ddt.data(
        ("/app/news/page", "/app/", "~/news/page"),
        ("/app/news/page", "/app", "~/news/page"),
        ("/APP/news/page", "/app/", "~/news/page"),
        ("/app", "/app/", "~/"),
        ("/app/", "/app/", "~/"),
        ("/other/page", "/app/", "/other/page"),
        ("/news/page", "/", "~/news/page"),
        ("relative/page", "/app/", "relative/page"),
        ("~/news", "/app/", "~/news"),
        ("https://example.com/app/news", "/app/", "https://example.com/app/news"),
        (None, "/app/", None),
        ("", "/app/", ""),
    )
    @ddt.unpack
    def test_to_relative(self, path, app_path, expected):
        assert paths.to_relative(path, app_path) == expected

    @ddt.data(
        ("~/news/page", "/app/", "/app/news/page"),
        ("~/", "/app", "/app/"),
        ("/news/page", "/app/", "/news/page"),
        ("relative/page", "/app/", "relative/page"),
        (None, "/app/", None),
    )
    @ddt.unpack
    def test_to_absolute(self, path, app_path, expected):
        assert paths.to_absolute(path, app_path) == expected

    @override_settings(CONTENT_EDITABLES={"APPLICATION_PATH": "/site"})
    def test_configured_application_path(self):
        assert paths.application_path() == "/site/"
        assert paths.to_relative("/site/news") == "~/news"
        assert paths.to_absolute("~/news") == "/site/news"

    @override_settings(CONTENT_EDITABLES={})
    def test_script_prefix_application_path(self):
        set_script_prefix("/mounted/")
        try:
            assert paths.application_path() == "/mounted/"
        finally:
            set_script_prefix("/")

    @override_settings(CONTENT_EDITABLES={"APPLICATION_PATH": "site"})
    def test_invalid_application_path(self):
        with pytest.raises(InvalidPath):
            paths.application_path()

    @ddt.data(
        ("/page", True, False),
        ("~/page", False, False),
        ("page", False, False),
        ("//example.com/page", False, True),
        ("mailto:editor@example.com", False, True),
        ("", False, False),
    )
    @ddt.unpack
    def test_classification(self, path, absolute, external):
        assert paths.is_absolute(path) == absolute
        assert paths.is_external(path) == external
