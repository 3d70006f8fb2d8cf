"""Tests prévisualisation — jeton Faust, cookies signés, routes /api/preview et /preview."""
from unittest.mock import MagicMock

import requests

from beacon_front.api.preview import (
    TokenVerification, build_preview_url, preview_target_from_path, safe_redirect,
    sign_session, verify_preview_token,
)
from beacon_front.config import DEFAULT_WORDPRESS_URL
from beacon_front.wp import queries

from conftest import page_payload, post_payload


def _set_session(client, post_id, post_type, flag=None):
    client.cookies.set("wp_preview_post_id", post_id)
    client.cookies.set("wp_preview_post_type", post_type)
    client.cookies.set("wp_preview", flag or sign_session(post_id, post_type))


# ── Helpers ──────────────────────────────────────────────────────────────────

def test_build_preview_url():
    assert build_preview_url(42, "post") == "/preview/post/42"
    assert build_preview_url(7, "page") == "/preview/page/7"
    assert build_preview_url(9, "flms-courses") == "/preview/course/9"
    assert build_preview_url(3, "event") == "/preview/event/3"
    assert build_preview_url(3, "page", "/about/") == "/preview/about/"
    assert build_preview_url(3, "page", "about/") == "/preview/about/"


def test_preview_target_from_path():
    assert preview_target_from_path("post/123") == {"post_id": "123", "post_type": "post"}
    assert preview_target_from_path("/course/9") == {"post_id": "9", "post_type": "flms-courses"}
    assert preview_target_from_path("drafts/5") == {"post_id": "5", "post_type": None}
    assert preview_target_from_path("about/") == {"post_id": None, "post_type": None}


def test_safe_redirect():
    assert safe_redirect("/about/") == "/about/"
    assert safe_redirect(None) == "/"
    assert safe_redirect("https://evil.example") == "/"
    assert safe_redirect("//evil.example") == "/"


def test_sign_session_depends_on_secret(monkeypatch):
    unsigned = sign_session("1", "post")
    monkeypatch.setenv("FAUST_SECRET_KEY", "s3cret")
    assert sign_session("1", "post") != unsigned
    assert sign_session("1", "post") != sign_session("2", "post")


# ── Vérification du jeton ────────────────────────────────────────────────────

def test_token_refused_without_secret():
    session = MagicMock()
    assert verify_preview_token("tok", session=session).valid is False
    session.post.assert_not_called()


def test_token_accepted(monkeypatch):
    monkeypatch.setenv("FAUST_SECRET_KEY", "s3cret")
    session = MagicMock()
    session.post.return_value.ok = True
    session.post.return_value.json.return_value = {"post_id": 5, "post_type": "page", "uri": "/about/"}

    result = verify_preview_token("tok", session=session)

    assert result == TokenVerification(valid=True, post_id=5, post_type="page", uri="/about/")
    session.post.assert_called_once_with(
        f"{DEFAULT_WORDPRESS_URL}/wp-json/faustwp/v1/authorize",
        json={"code": "tok", "secret": "s3cret"},
        timeout=15.0,
    )


def test_token_rejected_by_wordpress(monkeypatch):
    monkeypatch.setenv("FAUST_SECRET_KEY", "s3cret")
    session = MagicMock()
    session.post.return_value.ok = False
    session.post.return_value.status_code = 403
    assert verify_preview_token("tok", session=session).valid is False


def test_token_network_error(monkeypatch):
    monkeypatch.setenv("FAUST_SECRET_KEY", "s3cret")
    session = MagicMock()
    session.post.side_effect = requests.Timeout("slow")
    assert verify_preview_token("tok", session=session).valid is False


def _faust_reply(monkeypatch, body):
    monkeypatch.setenv("FAUST_SECRET_KEY", "s3cret")
    session = MagicMock()
    session.post.return_value.ok = True
    session.post.return_value.json.return_value = body
    return session


def test_token_with_string_post_id(monkeypatch):
    session = _faust_reply(monkeypatch, {"post_id": "abc", "post_type": "post"})
    result = verify_preview_token("tok", session=session)
    assert result.valid is True
    assert result.post_id == "abc"


def test_token_with_malformed_reply(monkeypatch):
    session = _faust_reply(monkeypatch, {"post_id": 5, "uri": {"path": "/about/"}})
    assert verify_preview_token("tok", session=session).valid is False


# ── /api/preview ─────────────────────────────────────────────────────────────

def test_enter_preview_requires_parameters(client):
    resp = client.get("/api/preview")
    assert resp.status_code == 400
    assert resp.json() == {"error": "Missing preview parameters"}


def test_enter_preview_invalid_token(client):
    resp = client.get("/api/preview?p=1&token=bad")
    assert resp.status_code == 401
    assert resp.json() == {"error": "Invalid preview token"}


def test_enter_preview_without_token_sets_session(client):
    resp = client.get("/api/preview?p=42&post_type=page", follow_redirects=False)
    assert resp.status_code == 307
    assert resp.headers["location"] == "/preview/page/42"
    cookies = resp.headers.get_list("set-cookie")
    assert any(c.startswith("wp_preview_post_id=42") for c in cookies)
    assert any(c.startswith(f"wp_preview={sign_session('42', 'page')}") for c in cookies)
    assert all("HttpOnly" in c and "SameSite=lax" in c and "Secure" not in c for c in cookies)


def test_enter_preview_with_verified_token(client, monkeypatch):
    monkeypatch.setattr(
        "beacon_front.api.routes.preview.verify_preview_token",
        lambda token: TokenVerification(valid=True, post_id=7, post_type="page", uri="/about/"),
    )
    resp = client.get("/api/preview?preview_id=abc", follow_redirects=False)
    assert resp.status_code == 307
    assert resp.headers["location"] == "/preview/about/"
    assert any(c.startswith("wp_preview_post_id=7") for c in resp.headers.get_list("set-cookie"))


def test_enter_preview_token_without_post_id(client, monkeypatch):
    monkeypatch.setattr(
        "beacon_front.api.routes.preview.verify_preview_token",
        lambda token: TokenVerification(valid=True),
    )
    resp = client.get("/api/preview?token=abc")
    assert resp.status_code == 400


# ── /api/exit-preview ────────────────────────────────────────────────────────

def test_exit_preview_redirects_and_clears(client):
    resp = client.get("/api/exit-preview?redirect=/about/", follow_redirects=False)
    assert resp.status_code == 307
    assert resp.headers["location"] == "/about/"
    cleared = [c for c in resp.headers.get_list("set-cookie") if "Max-Age=0" in c]
    assert len(cleared) == 3


def test_exit_preview_ignores_external_redirect(client):
    resp = client.get("/api/exit-preview?redirect=//evil.example", follow_redirects=False)
    assert resp.headers["location"] == "/"


def test_exit_preview_api(client):
    resp = client.post("/api/exit-preview")
    assert resp.json() == {"success": True}


# ── /preview/... ─────────────────────────────────────────────────────────────

def test_preview_page_requires_session(client):
    resp = client.get("/preview/page/42", follow_redirects=False)
    assert resp.status_code == 307
    assert resp.headers["location"] == "/api/exit-preview"


def test_preview_flow(client, wp):
    wp.responses[queries.GET_PREVIEW_CONTENT] = lambda v: {
        "contentNode": page_payload(title="Draft About", status="draft"),
    }
    client.get("/api/preview?p=2&post_type=page", follow_redirects=False)

    resp = client.get("/preview/page/2")

    assert resp.status_code == 200
    assert resp.headers["x-robots-tag"] == "noindex, nofollow"
    assert "Draft About" in resp.text
    assert "Preview Mode" in resp.text
    assert "(Page #2)" in resp.text
    assert "/api/exit-preview?redirect=%2Fpage%2F2" in resp.text
    assert wp.calls[-1] == (queries.GET_PREVIEW_CONTENT, {"id": "2", "asPreview": True})


def test_forged_flag_is_rejected(client):
    _set_session(client, "2", "page", flag="0" * 64)
    resp = client.get("/preview/page/2", follow_redirects=False)
    assert resp.status_code == 307


def test_preview_without_post_id(client):
    client.cookies.set("wp_preview", sign_session("", ""))
    resp = client.get("/preview/about")
    assert resp.status_code == 200
    assert "Preview Error" in resp.text
    assert resp.headers["x-robots-tag"] == "noindex, nofollow"


def test_preview_id_from_path(client, wp):
    wp.responses[queries.GET_PREVIEW_CONTENT] = {"contentNode": page_payload()}
    client.cookies.set("wp_preview", sign_session("", ""))
    resp = client.get("/preview/post/2")
    assert resp.status_code == 200
    assert wp.calls[-1][1]["id"] == "2"


def test_preview_unavailable(client):
    _set_session(client, "99", "post")
    resp = client.get("/preview/post/99")
    assert resp.status_code == 200
    assert "Preview Not Available" in resp.text


def test_preview_session_renders_draft_on_public_route(client, wp):
    wp.responses[queries.GET_CONTENT_BY_URI] = {"nodeByUri": page_payload()}
    wp.responses[queries.GET_PREVIEW_CONTENT] = {"contentNode": page_payload(title="Draft About", status="draft")}
    client.get("/about/")
    _set_session(client, "2", "page")

    resp = client.get("/about/")

    assert resp.headers["x-robots-tag"] == "noindex, nofollow"
    assert wp.count(queries.GET_CONTENT_BY_URI) == 2
    assert (queries.GET_PREVIEW_CONTENT, {"id": "2", "asPreview": True}) in wp.calls
    assert "Draft About" in resp.text
    assert "Exit Preview" in resp.text
    assert "/api/exit-preview?redirect=%2Fabout%2F" in resp.text


def test_preview_session_falls_back_to_published(client, wp):
    wp.responses[queries.GET_CONTENT_BY_URI] = {"nodeByUri": page_payload()}
    _set_session(client, "2", "page")
    resp = client.get("/about/")
    assert resp.status_code == 200
    assert "About Us" in resp.text
    assert "Exit Preview" in resp.text


def test_preview_session_requests_post_draft(client, wp):
    wp.responses[queries.GET_POST_BY_SLUG] = lambda v: {
        "post": post_payload(title="Draft Post" if v["asPreview"] else "Hello World"),
    }
    assert "Hello World" in client.get("/blog/hello-world").text
    assert wp.calls[-1][1] == {"slug": "hello-world", "asPreview": False}

    _set_session(client, "1", "post")
    resp = client.get("/blog/hello-world")

    assert wp.calls[-1][1] == {"slug": "hello-world", "asPreview": True}
    assert "Draft Post" in resp.text
    assert "Exit Preview" in resp.text
    assert resp.headers["x-robots-tag"] == "noindex, nofollow"


def test_public_route_has_no_banner(client, wp):
    wp.responses[queries.GET_CONTENT_BY_URI] = {"nodeByUri": page_payload()}
    resp = client.get("/about/")
    assert "Exit Preview" not in resp.text
    assert wp.count(queries.GET_PREVIEW_CONTENT) == 0
