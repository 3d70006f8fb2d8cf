"""
Accès WordPress — client WPGraphQL, documents de requêtes, fetchers.
"""
from .client import QueryResult, WordPressClient, get_client
from .fetchers import (
    collect_static_uris, extract_nodes, get_all_course_slugs, get_all_courses,
    get_all_page_uris, get_all_pages, get_all_post_slugs, get_all_posts,
    get_content_node_by_uri, get_content_type_by_uri, get_course, get_course_cards,
    get_featured_courses, get_menu, get_page, get_post, get_preview_node,
    get_site_data, get_site_settings, get_typename, has_data, normalize_uri,
)

__all__ = [
    "QueryResult", "WordPressClient", "get_client",
    "collect_static_uris", "extract_nodes", "get_all_course_slugs", "get_all_courses",
    "get_all_page_uris", "get_all_pages", "get_all_post_slugs", "get_all_posts",
    "get_content_node_by_uri", "get_content_type_by_uri", "get_course", "get_course_cards",
    "get_featured_courses", "get_menu", "get_page", "get_post", "get_preview_node",
    "get_site_data", "get_site_settings", "get_typename", "has_data", "normalize_uri",
]
