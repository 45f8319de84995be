"""
Tests for configuration, exceptions, the host probe and the request context
"""

from unittest.mock import MagicMock

import pytest
from fastapi import status

from universal_seo.config import Settings
from universal_seo.context import RequestContext, get_request_context
from universal_seo.exceptions import (
    LocaleNotSupportedError,
    SEOException,
    StorageError,
    UnsupportedPostTypeError,
    ValidationError,
)
from universal_seo.host import HostEnvironment
from universal_seo.models import ContentItem

# ══════════════════════════════════════════════════════════════════════════════
# 1. Settings
# ══════════════════════════════════════════════════════════════════════════════


class TestSettings:
    def test_defaults(self):
        s = Settings()
        assert s.meta_namespace == "gg_seo"
        assert s.default_locale == "en_US"
        assert s.seo_post_types == ["post", "page", "product"]

    def test_env_prefix(self, monkeypatch):
        monkeypatch.setenv("SEO_DEFAULT_LOCALE", "it_IT")
        monkeypatch.setenv("SEO_BUFFER_ENABLED", "false")
        s = Settings()
        assert s.default_locale == "it_IT"
        assert s.buffer_enabled is False


# ══════════════════════════════════════════════════════════════════════════════
# 2. Exceptions
# ══════════════════════════════════════════════════════════════════════════════


class TestExceptions:
    def test_base_defaults(self):
        exc = SEOException("boom")
        assert str(exc) == "boom"
        assert exc.status_code == status.HTTP_500_INTERNAL_SERVER_ERROR
        assert exc.details == {}

    def test_validation_error_field(self):
        exc = ValidationError("bad", field="title")
        assert exc.status_code == status.HTTP_400_BAD_REQUEST
        assert exc.details == {"field": "title"}

    def test_unsupported_post_type(self):
        exc = UnsupportedPostTypeError("attachment", ["post", "page"])
        assert isinstance(exc, ValidationError)
        assert exc.details["allowed_types"] == ["post", "page"]

    def test_not_found(self):
        exc = LocaleNotSupportedError("fr_FR")
        assert exc.status_code == status.HTTP_404_NOT_FOUND
        assert exc.message == "Locale with id 'fr_FR' not found"

    def test_storage_error(self):
        exc = StorageError(operation="set")
        assert exc.details == {"operation": "set"}


# ══════════════════════════════════════════════════════════════════════════════
# 3. HostEnvironment
# ══════════════════════════════════════════════════════════════════════════════


class TestHostEnvironment:
    def test_probes(self):
        env = HostEnvironment(
            constants={"WPSEO_VERSION": "22.0"},
            classes={"\\RankMath\\Helper"},
            functions={"aioseo": lambda: None, "not_callable": "x"},
            services={"svc": object()},
        )
        assert env.is_defined("WPSEO_VERSION")
        assert env.constant("MISSING", "d") == "d"
        assert env.class_exists("RankMath\\Helper")
        assert env.class_exists("\\RankMath\\Helper")
        assert env.function_exists("aioseo")
        assert not env.function_exists("not_callable")
        assert env.function("not_callable") is None
        assert env.service("svc") is not None
        assert env.service("missing") is None


# ══════════════════════════════════════════════════════════════════════════════
# 4. RequestContext
# ══════════════════════════════════════════════════════════════════════════════


def _request(path, headers=None):
    request = MagicMock()
    request.url.path = path
    request.url.__str__.return_value = f"https://example.com{path}"
    request.headers = headers or {}
    request.state = MagicMock(spec=[])
    return request


class TestRequestContext:
    def test_memoize_computes_once(self):
        ctx = RequestContext()
        compute = MagicMock(return_value="v")
        assert ctx.memoize("k", compute) == "v"
        assert ctx.memoize("k", compute) == "v"
        compute.assert_called_once()

    def test_set_item(self):
        ctx = RequestContext()
        ctx.set_item(ContentItem(1))
        assert ctx.is_singular
        ctx.set_item(None)
        assert not ctx.is_singular

    def test_flags_from_path(self):
        assert RequestContext.from_request(_request("/admin/edit")).is_admin
        assert RequestContext.from_request(_request("/api/v1/x")).is_rest
        assert RequestContext.from_request(_request("/cron")).doing_cron
        assert RequestContext.from_request(_request("/xmlrpc")).is_xmlrpc
        assert RequestContext.from_request(_request("/blog/feed/")).is_feed
        assert RequestContext.from_request(_request("/robots.txt")).is_robots

    @pytest.mark.parametrize("path", ["/administrator-bio", "/apiary", "/adminx/edit", "/feedback", "/phantom"])
    def test_prefix_flags_respect_segments(self, path):
        ctx = RequestContext.from_request(_request(path))
        assert not (ctx.is_admin or ctx.is_rest or ctx.is_feed)

    def test_admin_root_is_admin(self):
        assert RequestContext.from_request(_request("/admin")).is_admin
        assert RequestContext.from_request(_request("/api")).is_rest

    def test_ajax_header(self):
        ctx = RequestContext.from_request(_request("/page", {"X-Requested-With": "XMLHttpRequest"}))
        assert ctx.doing_ajax

    def test_plain_page_has_no_flags(self):
        ctx = RequestContext.from_request(_request("/content/1"))
        assert ctx.url == "https://example.com/content/1"
        assert not any(
            [ctx.is_admin, ctx.doing_ajax, ctx.doing_cron, ctx.is_rest, ctx.is_xmlrpc, ctx.is_feed, ctx.is_robots]
        )

    def test_get_request_context_attaches_once(self):
        request = MagicMock()
        request.state = type("State", (), {})()
        request.url.path = "/content/1"
        request.headers = {}

        first = get_request_context(request)
        assert get_request_context(request) is first
