"""Catalogue de formations avec filtres (état dans la query string)."""
from fastapi import APIRouter, Request
from fastapi.responses import HTMLResponse

from ...core.course_filters import QUERY_PARAMS, CourseFilterState, filter_courses
from ...core.schemas import CourseNode, parse_content_node
from ...renderer.layout import render_document
from ...templates.site import render_course_catalog
from ...wp import fetchers
from ..preview import read_session
from ..rendering import cached_page, wp

router = APIRouter(tags=["Courses"])

CATALOG_SIZE = 100


@router.get("/courses", response_class=HTMLResponse)
@router.get("/courses/", response_class=HTMLResponse, include_in_schema=False)
def course_catalog(request: Request):
    state = CourseFilterState.from_query(request.query_params)

    def build():
        result = fetchers.get_all_courses(first=CATALOG_SIZE, client=wp(request))
        courses = []
        if result.ok:
            for raw in fetchers.extract_nodes(result.data.get("flmsCourses")):
                node = parse_content_node({"__typename": "FlmsCourse", **raw})
                if isinstance(node, CourseNode):
                    courses.append(node)
        body = render_course_catalog(filter_courses(courses, state), state, total=len(courses))
        return render_document(body, "Courses",
                               "Browse our comprehensive continuing education courses for financial professionals"), 200

    return cached_page(request, build, preview=read_session(request).enabled, params=QUERY_PARAMS)
