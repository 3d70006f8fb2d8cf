"""Tests routes publiques — pages WordPress, accueil, blog, catalogue, SEO."""
from beacon_front.wp import queries

from conftest import course_payload, page_payload, post_payload


def _by_uri(v):
    return {"nodeByUri": page_payload() if v["uri"] == "/about/" else None}


def test_health(client):
    resp = client.get("/health")
    assert resp.status_code == 200
    assert resp.json()["status"] == "ok"


# ── Attrape-tout ─────────────────────────────────────────────────────────────

def test_content_page(client, wp):
    wp.responses[queries.GET_CONTENT_BY_URI] = _by_uri
    resp = client.get("/about/")
    assert resp.status_code == 200
    assert "<title>About Us | BHFE</title>" in resp.text
    assert '<meta name="description" content="We teach.">' in resp.text
    assert "<p>We teach.</p>" in resp.text
    assert wp.calls[-1] == (queries.GET_CONTENT_BY_URI, {"uri": "/about/"})


def test_unknown_uri_is_404(client, wp):
    wp.responses[queries.GET_CONTENT_BY_URI] = _by_uri
    resp = client.get("/nowhere/")
    assert resp.status_code == 404
    assert "Page Not Found" in resp.text


def test_wordpress_error_is_404(client):
    assert client.get("/about/").status_code == 404


def test_pages_are_cached(client, wp):
    wp.responses[queries.GET_CONTENT_BY_URI] = _by_uri
    first = client.get("/about/")
    second = client.get("/about/")
    assert first.text == second.text
    assert wp.count(queries.GET_CONTENT_BY_URI) == 1


def test_not_found_is_not_cached(client, wp):
    wp.responses[queries.GET_CONTENT_BY_URI] = _by_uri
    client.get("/nowhere/")
    client.get("/nowhere/")
    assert wp.count(queries.GET_CONTENT_BY_URI) == 2


def test_typed_nodes_use_their_template(client, wp):
    wp.responses[queries.GET_CONTENT_BY_URI] = {"nodeByUri": course_payload()}
    resp = client.get("/course/ethics/")
    assert "Enroll Now" in resp.text
    assert "<title>Ethics for CPAs | BHFE</title>" in resp.text


# ── Accueil ──────────────────────────────────────────────────────────────────

def test_home(client, wp):
    wp.responses[queries.GET_FEATURED_COURSES] = {"flmsCourses": {"nodes": [course_payload()]}}
    wp.responses[queries.GET_SITE_DATA] = {"generalSettings": {"title": "BHFE", "description": "Learn more"}}
    resp = client.get("/")
    assert resp.status_code == 200
    assert "Featured Courses" in resp.text
    assert "Ethics for CPAs" in resp.text
    assert 'href="/course/ethics/"' in resp.text
    assert "Learn more" in resp.text
    assert "<title>Beacon Hill Financial Educators</title>" in resp.text


def test_home_without_wordpress(client):
    resp = client.get("/")
    assert resp.status_code == 200
    assert "Unable to connect to WordPress." in resp.text


# ── Blog ─────────────────────────────────────────────────────────────────────

def test_blog_index(client, wp):
    wp.responses[queries.GET_POSTS] = {"posts": {"nodes": [post_payload()]}}
    resp = client.get("/blog")
    assert "Hello World" in resp.text
    assert "Read More" in resp.text
    assert wp.calls[-1][1]["first"] == 12


def test_blog_index_empty(client, wp):
    wp.responses[queries.GET_POSTS] = {"posts": {"nodes": []}}
    assert "No posts found." in client.get("/blog/").text


def test_blog_post(client, wp):
    wp.responses[queries.GET_POST_BY_SLUG] = lambda v: {"post": post_payload() if v["slug"] == "hello-world" else None}
    resp = client.get("/blog/hello-world")
    assert resp.status_code == 200
    assert "Back to Blog" in resp.text
    assert client.get("/blog/missing").status_code == 404


# ── Catalogue ────────────────────────────────────────────────────────────────

def _catalog(wp):
    wp.responses[queries.GET_COURSES] = {"flmsCourses": {"nodes": [
        course_payload(),
        course_payload(id="c2", title="Retirement Planning", slug="retire", uri="/course/retire/",
                       courseNumber="205", courseCredits=[{"name": "CFP®", "credits": "8"}]),
    ]}}


def test_course_catalog(client, wp):
    _catalog(wp)
    resp = client.get("/courses")
    assert "All Courses" in resp.text
    assert "Showing <strong>2</strong> of 2 courses" in resp.text
    assert "Clear all filters" not in resp.text
    assert wp.calls[-1][1]["first"] == 100


def test_course_catalog_filters(client, wp):
    _catalog(wp)
    resp = client.get("/courses/?d=cfp")
    assert "Showing <strong>1</strong> of 2 courses" in resp.text
    assert "Retirement Planning" in resp.text
    assert "Ethics for CPAs" not in resp.text
    assert "Clear all filters" in resp.text


def test_course_catalog_no_match(client, wp):
    _catalog(wp)
    resp = client.get("/courses?q=astronomy")
    assert "No courses match your filters." in resp.text


# ── SEO ──────────────────────────────────────────────────────────────────────

def test_sitemap_empty_on_staging(client, wp):
    resp = client.get("/sitemap.xml")
    assert resp.headers["content-type"].startswith("application/xml")
    assert "<loc>" not in resp.text
    assert wp.calls == []


def test_sitemap_in_production(client, wp, monkeypatch):
    monkeypatch.setenv("SITE_ENV", "production")
    wp.responses[queries.GET_ALL_PAGE_URIS] = {"pages": {"nodes": [{"uri": "/"}, {"uri": "/about/"}]}}
    resp = client.get("/sitemap.xml")
    locs = [part.split("</loc>")[0] for part in resp.text.split("<loc>")[1:]]
    assert locs == [
        "http://testserver/", "http://testserver/blog/", "http://testserver/courses/", "http://testserver/about/",
    ]


def test_robots(client, monkeypatch):
    assert "Disallow: /" in client.get("/robots.txt").text
    monkeypatch.setenv("SITE_ENV", "production")
    text = client.get("/robots.txt").text
    assert "Allow: /" in text
    assert "Sitemap: http://testserver/sitemap.xml" in text


def test_staging_badge_and_noindex(client, wp, monkeypatch):
    wp.responses[queries.GET_CONTENT_BY_URI] = _by_uri
    staging = client.get("/about/").text
    assert "STAGING" in staging
    assert 'name="robots" content="noindex, nofollow"' in staging

    monkeypatch.setenv("SITE_ENV", "production")
    client.app.state.cache.invalidate()
    production = client.get("/about/").text
    assert "STAGING" not in production
    assert 'name="robots"' not in production


# ── Clés de cache ────────────────────────────────────────────────────────────

def test_unread_query_params_share_cache_entry(client, wp):
    wp.responses[queries.GET_CONTENT_BY_URI] = _by_uri
    for i in range(50):
        assert client.get(f"/about/?utm_source={i}").status_code == 200
    assert len(client.app.state.cache) == 1
    assert wp.count(queries.GET_CONTENT_BY_URI) == 1


def test_course_filters_vary_cache_entry(client, wp):
    _catalog(wp)
    client.get("/courses?d=cfp&utm=1")
    client.get("/courses?utm=2&d=cfp")
    assert wp.count(queries.GET_COURSES) == 1
    client.get("/courses?d=cpa")
    assert wp.count(queries.GET_COURSES) == 2
    assert len(client.app.state.cache) == 2
