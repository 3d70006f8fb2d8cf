"""Tests filtres du catalogue — lecture de la query string, critères, tri."""
from beacon_front.core.course_filters import (
    DEFAULT_SORT, MAX_CREDITS, MIN_CREDITS, CourseFilterState, course_max_credits, credit_value,
    filter_courses, matches_designation, matches_search,
)
from beacon_front.core.schemas import CourseCredit, CourseNode
from beacon_front.templates.site import filter_query


def _course(title, number, credits, description=""):
    return CourseNode.model_validate({
        "id": title,
        "title": title,
        "courseNumber": number,
        "courseDescription": description,
        "courseCredits": [{"name": n, "credits": c} for n, c in credits],
    })


ETHICS = _course("Ethics for CPAs", "101", [("CPA/CPE", "4")], "Professional conduct")
RETIRE = _course("Retirement Planning", "205", [("CFP®", "8"), ("CPA/CPE", "8")])
ENROLLED = _course("Annual Filing Season", "310", [("EA/OTRP (IRS)", "18")])
ALL = [RETIRE, ENROLLED, ETHICS]


def test_from_query_defaults():
    state = CourseFilterState.from_query({})
    assert state.search == ""
    assert state.designations == []
    assert (state.min_credits, state.max_credits) == (MIN_CREDITS, MAX_CREDITS)
    assert state.sort == DEFAULT_SORT
    assert not state.is_active


def test_from_query_parses_values():
    state = CourseFilterState.from_query({"q": "  ethics ", "d": "cpa,,cfp", "min": "2", "max": "10", "sort": "credits-desc"})
    assert state.search == "ethics"
    assert state.designations == ["cpa", "cfp"]
    assert (state.min_credits, state.max_credits) == (2, 10)
    assert state.sort == "credits-desc"
    assert state.is_active


def test_from_query_rejects_bad_values():
    state = CourseFilterState.from_query({"min": "abc", "max": "0", "sort": "random"})
    assert (state.min_credits, state.max_credits) == (MIN_CREDITS, MAX_CREDITS)
    assert state.sort == DEFAULT_SORT


def test_credit_value_reads_leading_number():
    assert credit_value(CourseCredit(credits="2.5 CPE")) == 2.5
    assert credit_value(CourseCredit(credits=" 4")) == 4.0
    assert credit_value(CourseCredit(credits=".5")) == 0.5
    assert credit_value(CourseCredit(credits="CPE 3")) == 0.0
    assert credit_value(None) == 0.0


def test_leading_number_credits_pass_default_filter():
    course = _course("Estate Basics", "120", [("CFP®", "2.5 hours")])
    assert course_max_credits(course) == 2.5
    assert filter_courses([course], CourseFilterState()) == [course]


def test_course_max_credits():
    assert course_max_credits(RETIRE) == 8.0
    assert course_max_credits(_course("Free", "1", [("CPA", "n/a")])) == 0.0
    assert course_max_credits(_course("None", "1", [])) == 0.0


def test_matches_search_fields():
    assert matches_search(ETHICS, "ETHICS")
    assert matches_search(ETHICS, "101")
    assert matches_search(ETHICS, "conduct")
    assert not matches_search(ETHICS, "retirement")
    assert matches_search(ETHICS, "")


def test_matches_designation():
    assert matches_designation(ETHICS, ["cpa"])
    assert matches_designation(ENROLLED, ["ea-otrp"])
    assert not matches_designation(ETHICS, ["cfp"])
    assert matches_designation(ETHICS, ["cfp", "cpa"])
    assert not matches_designation(ETHICS, ["unknown"])
    assert matches_designation(ETHICS, [])


def test_default_sort_is_title():
    assert [c.title for c in filter_courses(ALL, CourseFilterState())] == [
        "Annual Filing Season", "Ethics for CPAs", "Retirement Planning",
    ]


def test_sort_variants():
    def titles(sort):
        return [c.course_number for c in filter_courses(ALL, CourseFilterState(sort=sort))]

    assert titles("title-desc") == ["205", "101", "310"]
    assert titles("number-asc") == ["101", "205", "310"]
    assert titles("credits-desc") == ["310", "205", "101"]
    assert titles("credits-asc") == ["101", "205", "310"]


def test_credit_range():
    state = CourseFilterState(min_credits=5, max_credits=10)
    assert filter_courses(ALL, state) == [RETIRE]


def test_combined_filters():
    state = CourseFilterState(search="planning", designations=["cpa"])
    assert filter_courses(ALL, state) == [RETIRE]


def test_filter_query_omits_defaults():
    assert filter_query(CourseFilterState()) == ""
    state = CourseFilterState(search="tax law", designations=["cpa", "cfp"], max_credits=10)
    assert filter_query(state) == "?q=tax+law&d=cpa%2Ccfp&max=10"
    assert filter_query(state, designations=[]) == "?q=tax+law&max=10"
