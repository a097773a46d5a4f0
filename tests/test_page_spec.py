"""Tests for wren.pages.spec: page spec validation and model binding."""

from typing import Any

import pytest

from wren.errors import ConfigurationError
from wren.pages.spec import build_page_spec, is_absolute_url
from wren.pages.types import DEFAULT_HEADERS, Blob, Page, Redirect

BASE_HREF = "/2017/my-project"

FRIENDS = [
    {"name": "Bill", "permalink": "bill"},
    {"name": "Ted", "permalink": "ted"},
]


def _db() -> dict[str, Any]:
    return {"hero": {"name": "Superman", "nFriends": 2000}, "friends": list(FRIENDS)}


def _build(entry: dict[str, Any], database: dict[str, Any] | None = None):
    return build_page_spec(entry, base_href=BASE_HREF, database=database)


class TestPathValidation:
    def test_missing_path(self) -> None:
        with pytest.raises(ConfigurationError, match='must have a "path"'):
            _build({"template": "x"})

    def test_slash_only(self) -> None:
        with pytest.raises(ConfigurationError, match="_root"):
            _build({"path": "/"})

    def test_leading_slash(self) -> None:
        with pytest.raises(ConfigurationError, match='cannot start with "/"') as exc_info:
            _build({"path": "/simple"})
        assert '"path": "/simple"' in str(exc_info.value)

    def test_non_string_path(self) -> None:
        with pytest.raises(ConfigurationError):
            _build({"path": 42})

    def test_not_a_mapping(self) -> None:
        with pytest.raises(ConfigurationError, match="must be a mapping"):
            build_page_spec(["simple"], base_href=BASE_HREF)  # type: ignore[arg-type]

    def test_unknown_key(self) -> None:
        with pytest.raises(ConfigurationError, match="unknown keys"):
            _build({"path": "friends/:permalink", "colection": "friends"}, _db())


class TestBindingValidation:
    def test_placeholder_without_binding(self) -> None:
        with pytest.raises(ConfigurationError, match="no \"model\" or \"collection\""):
            _build({"path": "friends/:permalink"}, _db())

    def test_blob_without_binding(self) -> None:
        entry = {"path": "x.txt", "blob": "name", "headers": {"Content-Type": "text/plain"}}
        with pytest.raises(ConfigurationError, match='includes "blob"'):
            _build(entry, _db())

    def test_model_and_collection(self) -> None:
        with pytest.raises(ConfigurationError, match="both"):
            _build({"path": "x", "model": "hero", "collection": "friends"}, _db())

    def test_no_database(self) -> None:
        with pytest.raises(ConfigurationError, match="no database"):
            _build({"path": "my-hero", "model": "hero"}, None)

    def test_missing_model_key(self) -> None:
        with pytest.raises(ConfigurationError, match=r"database\['villain'\] which does not exist"):
            _build({"path": "villain", "model": "villain"}, _db())

    def test_missing_collection_key(self) -> None:
        with pytest.raises(ConfigurationError, match="collection"):
            _build({"path": "x/:id", "collection": "villains"}, _db())

    def test_collection_not_a_list(self) -> None:
        with pytest.raises(ConfigurationError, match="not a list"):
            _build({"path": "x/:name", "collection": "hero"}, _db())

    def test_collection_string_is_not_a_list(self) -> None:
        with pytest.raises(ConfigurationError, match="not a list"):
            _build({"path": "x/:name", "collection": "title"}, {"title": "abc"})

    def test_checks_run_in_declared_order(self) -> None:
        # both a placeholder without binding and a blob without binding:
        # the placeholder rule is checked first
        entry = {"path": "x/:id", "blob": "name"}
        with pytest.raises(ConfigurationError, match="placeholder"):
            _build(entry, _db())


class TestKind:
    def test_page_defaults_template_to_path(self) -> None:
        spec = _build({"path": "simple"})
        assert spec.kind == Page(template="simple")
        assert spec.kind_name == "page"

    def test_page_explicit_template(self) -> None:
        spec = _build({"path": "my-hero", "template": "hero", "model": "hero"}, _db())
        assert spec.kind == Page(template="hero")

    def test_blob(self) -> None:
        spec = _build(
            {
                "path": "friends/:permalink.txt",
                "collection": "friends",
                "blob": "name",
                "headers": {"Content-Type": "text/plain; charset=utf-8"},
            },
            _db(),
        )
        assert spec.kind == Blob(field="name")
        assert spec.headers["Content-Type"] == "text/plain; charset=utf-8"

    def test_blob_requires_content_type(self) -> None:
        with pytest.raises(ConfigurationError, match="Content-Type"):
            _build({"path": "f/:permalink.txt", "collection": "friends", "blob": "name"}, _db())

    def test_blob_content_type_is_case_sensitive(self) -> None:
        entry = {
            "path": "f/:permalink.txt",
            "collection": "friends",
            "blob": "name",
            "headers": {"content-type": "text/plain"},
        }
        with pytest.raises(ConfigurationError, match="case-sensitive"):
            _build(entry, _db())

    def test_redirect(self) -> None:
        spec = _build({"path": "simple/", "redirect": "simple"})
        assert spec.kind == Redirect(destination="simple")

    def test_redirect_and_template(self) -> None:
        with pytest.raises(ConfigurationError, match='"template" and "redirect"'):
            _build({"path": "simple/", "redirect": "simple", "template": "simple"})

    def test_redirect_and_blob(self) -> None:
        entry = {
            "path": "f/:permalink/",
            "collection": "friends",
            "redirect": "f/:permalink",
            "blob": "name",
        }
        with pytest.raises(ConfigurationError, match='"blob" and "redirect"'):
            _build(entry, _db())


class TestHeaders:
    def test_defaults(self) -> None:
        spec = _build({"path": "simple"})
        assert dict(spec.headers) == dict(DEFAULT_HEADERS)

    def test_overrides_merge(self) -> None:
        spec = _build({"path": "simple", "headers": {"Cache-Control": "no-cache", "X-A": "1"}})
        assert spec.headers["Cache-Control"] == "no-cache"
        assert spec.headers["Content-Type"] == "text/html; charset=utf-8"
        assert spec.headers["X-A"] == "1"

    def test_headers_must_be_mapping(self) -> None:
        with pytest.raises(ConfigurationError, match="headers"):
            _build({"path": "simple", "headers": ["X-A: 1"]})

    def test_frozen(self) -> None:
        spec = _build({"path": "simple"})
        with pytest.raises(TypeError):
            spec.headers["X-A"] = "1"  # type: ignore[index]


class TestStaticSpec:
    def test_single_endpoint(self) -> None:
        spec = _build({"path": "simple"})
        assert [e.url for e in spec.endpoints] == ["/2017/my-project/simple"]
        assert spec.endpoints[0].model is None
        assert spec.placeholder_keys == ()
        assert spec.is_parametric is False
        assert dict(spec.reverse) == {(): "/2017/my-project/simple"}

    def test_root(self) -> None:
        spec = _build({"path": "_root", "redirect": "simple"})
        assert spec.endpoints[0].url == "/2017/my-project"

    def test_root_slash(self) -> None:
        spec = _build({"path": "_root/", "redirect": "simple"})
        assert spec.endpoints[0].url == "/2017/my-project/"

    def test_static_with_model(self) -> None:
        db = _db()
        spec = _build({"path": "my-hero", "template": "hero", "model": "hero"}, db)
        assert spec.endpoints[0].model is db["hero"]
        assert spec.database_key == "hero"

    def test_list_as_model_renders_once(self) -> None:
        db = _db()
        spec = _build({"path": "friends", "model": "friends"}, db)
        assert len(spec.endpoints) == 1
        assert spec.endpoints[0].model is db["friends"]


class TestParametricSpec:
    def test_collection_endpoints(self) -> None:
        db = _db()
        spec = _build({"path": "friends/:permalink", "collection": "friends"}, db)

        assert [e.url for e in spec.endpoints] == [
            "/2017/my-project/friends/bill",
            "/2017/my-project/friends/ted",
        ]
        assert len(spec.endpoints) == len(db["friends"])
        for endpoint, model in zip(spec.endpoints, db["friends"], strict=True):
            assert endpoint.model is model

    def test_reverse_lookup(self) -> None:
        spec = _build({"path": "friends/:permalink", "collection": "friends"}, _db())
        assert spec.reverse[("bill",)] == "/2017/my-project/friends/bill"
        assert spec.reverse[("ted",)] == "/2017/my-project/friends/ted"

    def test_multi_parameter(self) -> None:
        db = {
            "posts": [
                {"year": 2017, "slug": "a"},
                {"year": 2017, "slug": "b"},
                {"year": 2018, "slug": "a"},
            ]
        }
        spec = _build({"path": ":year/:slug", "collection": "posts"}, db)
        assert spec.placeholder_keys == ("year", "slug")
        assert spec.reverse[("2017", "b")] == "/2017/my-project/2017/b"
        assert spec.reverse[("2018", "a")] == "/2017/my-project/2018/a"
        assert len(spec.reverse) == 3

    def test_singular_model(self) -> None:
        db = {"me": {"slug": "me"}}
        spec = _build({"path": "people/:slug", "model": "me"}, db)
        assert [e.url for e in spec.endpoints] == ["/2017/my-project/people/me"]

    def test_empty_collection(self) -> None:
        spec = _build({"path": "x/:id", "collection": "none"}, {"none": []})
        assert spec.endpoints == ()

    def test_missing_placeholder_value(self) -> None:
        db = {"friends": [{"permalink": "bill"}, {"name": "Nobody"}]}
        with pytest.raises(ConfigurationError, match="index 1 is missing a 'permalink'"):
            _build({"path": "friends/:permalink", "collection": "friends"}, db)

    def test_empty_placeholder_value(self) -> None:
        db = {"friends": [{"permalink": ""}]}
        with pytest.raises(ConfigurationError, match="missing"):
            _build({"path": "friends/:permalink", "collection": "friends"}, db)

    def test_duplicate_placeholder_tuple(self) -> None:
        db = {"friends": [{"permalink": "bill"}, {"permalink": "bill"}]}
        with pytest.raises(ConfigurationError, match="same href"):
            _build({"path": "friends/:permalink", "collection": "friends"}, db)

    def test_models_are_referenced_not_copied(self) -> None:
        db = _db()
        spec = _build({"path": "friends/:permalink", "collection": "friends"}, db)
        assert spec.models[0] is db["friends"][0]
        assert db["friends"] == FRIENDS


class TestIsAbsoluteUrl:
    def test_http(self) -> None:
        assert is_absolute_url("https://example.com/x")
        assert is_absolute_url("http://example.com")

    def test_path(self) -> None:
        assert not is_absolute_url("friends/:permalink")
        assert not is_absolute_url("simple")
