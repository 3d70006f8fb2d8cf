"""Tests fetchers — variables envoyées, helpers, collecte d'URIs du sitemap."""
from beacon_front.wp import fetchers, queries
from beacon_front.wp.client import QueryResult

from conftest import FakeWordPress


def test_normalize_uri():
    assert fetchers.normalize_uri("about/") == "/about/"
    assert fetchers.normalize_uri("/about/") == "/about/"
    assert fetchers.normalize_uri("") == "/"


def test_content_by_uri_variables():
    wp = FakeWordPress()
    fetchers.get_content_node_by_uri("course/ethics", client=wp)
    assert wp.calls == [(queries.GET_CONTENT_BY_URI, {"uri": "/course/ethics"})]


def test_preview_node_variables():
    wp = FakeWordPress()
    fetchers.get_preview_node(42, client=wp)
    assert wp.calls == [(queries.GET_PREVIEW_CONTENT, {"id": "42", "asPreview": True})]


def test_post_variables():
    wp = FakeWordPress()
    fetchers.get_post("hello-world", client=wp)
    fetchers.get_post("hello-world", as_preview=True, client=wp)
    assert wp.calls == [
        (queries.GET_POST_BY_SLUG, {"slug": "hello-world", "asPreview": False}),
        (queries.GET_POST_BY_SLUG, {"slug": "hello-world", "asPreview": True}),
    ]


def test_paginated_fetchers():
    wp = FakeWordPress()
    fetchers.get_all_posts(first=12, client=wp)
    fetchers.get_featured_courses(3, client=wp)
    assert wp.calls[0] == (queries.GET_POSTS, {"first": 12, "after": None})
    assert wp.calls[1] == (queries.GET_FEATURED_COURSES, {"first": 3})


def test_extract_nodes():
    assert fetchers.extract_nodes({"nodes": [{"id": 1}, None, "x"]}) == [{"id": 1}]
    assert fetchers.extract_nodes({"nodes": None}) == []
    assert fetchers.extract_nodes(None) == []


def test_has_data_and_typename():
    assert fetchers.has_data(QueryResult(data={}))
    assert not fetchers.has_data(QueryResult(error="x"))
    assert fetchers.get_typename({"__typename": "Page"}) == "Page"
    assert fetchers.get_typename(None) is None


def test_collect_static_uris():
    wp = FakeWordPress({
        queries.GET_ALL_PAGE_URIS: {"pages": {"nodes": [
            {"uri": "/"}, {"uri": "/about/"}, {"uri": "/login/"}, {"uri": "/contact/"}, {"uri": "/about/"},
        ]}},
        queries.GET_ALL_COURSE_SLUGS: {"flmsCourses": {"nodes": [
            {"slug": "ethics", "uri": "/course/ethics/"}, {"slug": "tax"}, {"slug": None},
        ]}},
    })
    assert fetchers.collect_static_uris(client=wp) == ["/about/", "/contact/", "/course/ethics/", "/course/tax"]


def test_collect_static_uris_tolerates_failures(caplog):
    wp = FakeWordPress({
        queries.GET_ALL_COURSE_SLUGS: {"flmsCourses": {"nodes": [{"uri": "/course/a/"}]}},
    })
    assert fetchers.collect_static_uris(client=wp) == ["/course/a/"]
    assert "pages indisponibles" in caplog.text
