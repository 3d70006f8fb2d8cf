"""Tests content renderer — options de taille / largeur / balise, contenu vide."""
import pytest

from beacon_front.renderer.content import PROSE_CLASSES, render_content, render_prose


def _classes(html):
    return html.split('"')[1].split()


def test_empty_content_renders_nothing():
    assert render_content(None) == ""
    assert render_content("") == ""


def test_defaults():
    html = render_content("<p>Hi</p>")
    assert html.startswith('<div class="prose-lg max-w-none ')
    assert html.endswith("><p>Hi</p></div>")


@pytest.mark.parametrize("size, expected", [("sm", "prose-sm"), ("base", "prose"), ("lg", "prose-lg"), ("xl", "prose-xl")])
def test_sizes(size, expected):
    assert _classes(render_content("x", size=size))[0] == expected


@pytest.mark.parametrize("max_width, expected", [("prose", "max-w-prose"), ("none", "max-w-none"), ("full", "max-w-full")])
def test_max_widths(max_width, expected):
    assert _classes(render_content("x", max_width=max_width))[1] == expected


@pytest.mark.parametrize("tag", ["article", "div", "section"])
def test_allowed_tags(tag):
    html = render_content("x", tag=tag)
    assert html.startswith(f"<{tag} ") and html.endswith(f"</{tag}>")


def test_unknown_options_fall_back_to_defaults():
    html = render_content("x", size="huge", max_width="tiny", tag="script")
    classes = _classes(html)
    assert classes[:2] == ["prose-lg", "max-w-none"]
    assert html.startswith("<div ")


def test_class_name_is_appended():
    assert _classes(render_content("x", class_name="entry-content"))[-1] == "entry-content"


def test_markup_is_inserted_unsanitised():
    raw = '<p onclick="x()">Trusted</p><script>var a = 1;</script>'
    assert raw in render_content(raw)


def test_prose_classes_cover_wordpress_blocks():
    assert "[&_.wp-block-gallery]:grid" in PROSE_CLASSES


def test_render_prose():
    html = render_prose("<p>a</p>", size="sm", class_name="card")
    assert html.startswith('<div class="prose-sm prose-slate')
    assert html.split('"')[1].endswith("card")
