"""
Filtres du catalogue de formations (/courses).

L'état vit dans la query string (liens partageables) :
    q     recherche plein texte (titre, numéro, description)
    d     désignations, liste séparée par des virgules (ex. "cpa,cfp")
    min   crédits minimum (défaut 1)
    max   crédits maximum (défaut 50)
    sort  title-asc | title-desc | number-asc | credits-desc | credits-asc
"""
import re
from typing import Dict, Iterable, List, Mapping, Optional, Tuple

from pydantic import BaseModel, Field

from .schemas import CourseCredit, CourseNode

MIN_CREDITS = 1
MAX_CREDITS = 50
DEFAULT_SORT = "title-asc"

# paramètres de query string lus par from_query
QUERY_PARAMS = ("q", "d", "min", "max", "sort")

_LEADING_NUMBER = re.compile(r"\s*[-+]?(?:\d+(?:\.\d*)?|\.\d+)")

# id → (libellé, sous-chaînes recherchées dans le nom du crédit)
DESIGNATIONS: Dict[str, Tuple[str, Tuple[str, ...]]] = {
    "cpa":      ("CPA",       ("cpa", "cpe")),
    "cfp":      ("CFP®",      ("cfp",)),
    "ea-otrp":  ("EA/OTRP",   ("ea", "otrp", "irs")),
    "erpa":     ("ERPA",      ("erpa",)),
    "cdfa":     ("CDFA®",     ("cdfa",)),
    "iwi-cima": ("IWI/CIMA®", ("iwi", "cima")),
    "iar":      ("IAR",       ("iar",)),
}

SORT_OPTIONS = {
    "title-asc":    "Title (A-Z)",
    "title-desc":   "Title (Z-A)",
    "number-asc":   "Course Number",
    "credits-desc": "Most Credits",
    "credits-asc":  "Fewest Credits",
}


def _positive_int(raw: Optional[str], default: int) -> int:
    try:
        value = int(raw) if raw is not None else 0
    except ValueError:
        return default
    return value or default


class CourseFilterState(BaseModel):
    search: str = ""
    designations: List[str] = Field(default_factory=list)
    min_credits: int = MIN_CREDITS
    max_credits: int = MAX_CREDITS
    sort: str = DEFAULT_SORT

    @classmethod
    def from_query(cls, params: Mapping[str, str]) -> "CourseFilterState":
        sort = params.get("sort") or DEFAULT_SORT
        return cls(
            search=(params.get("q") or "").strip(),
            designations=[d for d in (params.get("d") or "").split(",") if d],
            min_credits=_positive_int(params.get("min"), MIN_CREDITS),
            max_credits=_positive_int(params.get("max"), MAX_CREDITS),
            sort=sort if sort in SORT_OPTIONS else DEFAULT_SORT,
        )

    @property
    def is_active(self) -> bool:
        return bool(
            self.search or self.designations
            or self.min_credits > MIN_CREDITS or self.max_credits < MAX_CREDITS
        )


# ── Critères ────────────────────────────────────────────────────────────────

def credit_value(credit: Optional[CourseCredit]) -> float:
    """Nombre en tête de `credits` ("2.5 CPE" → 2.5) ; 0 si absent."""
    if credit is None or not credit.credits:
        return 0.0
    match = _LEADING_NUMBER.match(credit.credits)
    return float(match.group(0)) if match else 0.0


def course_max_credits(course: CourseNode) -> float:
    return max((credit_value(c) for c in course.credits), default=0.0)


def matches_search(course: CourseNode, search: str) -> bool:
    if not search:
        return True
    needle = search.lower()
    return any(
        needle in (field or "").lower()
        for field in (course.title, course.course_number, course.course_description)
    )


def matches_designation(course: CourseNode, designations: Iterable[str]) -> bool:
    """Au moins une désignation demandée doit apparaître dans un nom de crédit."""
    designations = list(designations)
    if not designations:
        return True
    names = [c.name.lower() for c in course.credits if c.name]
    for designation in designations:
        _, needles = DESIGNATIONS.get(designation, ("", ()))
        if any(n in name for n in needles for name in names):
            return True
    return False


def _sort_key(sort: str):
    if sort in ("title-asc", "title-desc"):
        return lambda c: (c.title or "").casefold()
    if sort == "number-asc":
        return lambda c: (c.course_number or "").casefold()
    return course_max_credits


def filter_courses(courses: Iterable[CourseNode], state: CourseFilterState) -> List[CourseNode]:
    result = [
        c for c in courses
        if matches_search(c, state.search)
        and matches_designation(c, state.designations)
        and state.min_credits <= course_max_credits(c) <= state.max_credits
    ]
    result.sort(key=_sort_key(state.sort), reverse=state.sort in ("title-desc", "credits-desc"))
    return result
