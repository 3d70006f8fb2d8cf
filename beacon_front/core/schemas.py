"""
Schémas Pydantic — nœuds de contenu WordPress + blocs Gutenberg.

ContentNode : union discriminée par `__typename` (Page, Post, FlmsCourse, Category, Tag),
avec une variante GenericNode pour tout autre type renvoyé par WPGraphQL.
Block : arbre de blocs (name, attributes, innerBlocks, renderedHtml, originalContent).

Les nœuds sont en lecture seule pour tout le pipeline de rendu.
"""
import json
import logging
from enum import Enum
from typing import Any, Dict, List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

log = logging.getLogger(__name__)


class ContentType(str, Enum):
    PAGE     = "Page"
    POST     = "Post"
    COURSE   = "FlmsCourse"
    CATEGORY = "Category"
    TAG      = "Tag"


def _none_to_list(v: Any) -> Any:
    return [] if v is None else v


class _WPModel(BaseModel):
    """Base des sous-objets WPGraphQL (camelCase côté API, snake_case côté Python)."""
    model_config = ConfigDict(populate_by_name=True, extra="ignore")


# ── Blocs ───────────────────────────────────────────────────────────────────

class Block(_WPModel):
    """Un bloc Gutenberg tel que renvoyé par WPGraphQL Content Blocks."""
    name: str = ""
    attributes: Dict[str, Any] = Field(default_factory=dict)
    inner_blocks: List["Block"] = Field(default_factory=list, alias="innerBlocks")
    rendered_html: Optional[str] = Field(default=None, alias="renderedHtml")
    original_content: Optional[str] = Field(default=None, alias="originalContent")

    @field_validator("name", mode="before")
    @classmethod
    def _name_or_empty(cls, v):
        return v or ""

    @field_validator("attributes", mode="before")
    @classmethod
    def _attributes_as_dict(cls, v):
        # certains resolvers renvoient les attributs en JSON brut
        if isinstance(v, str):
            try:
                v = json.loads(v)
            except ValueError:
                return {}
        return v if isinstance(v, dict) else {}

    @field_validator("inner_blocks", mode="before")
    @classmethod
    def _inner_blocks_list(cls, v):
        return _none_to_list(v)


def build_block_tree(flat_blocks: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
    """
    Reconstruit l'arbre depuis la liste plate `editorBlocks` (clientId / parentClientId).

    L'ordre d'entrée est conservé à chaque niveau. Un parent introuvable fait
    remonter le bloc à la racine plutôt que de le perdre.
    """
    nodes: Dict[str, Dict[str, Any]] = {}
    ordered: List[Dict[str, Any]] = []
    for raw in flat_blocks:
        if not isinstance(raw, dict):
            continue
        node = {k: v for k, v in raw.items() if k != "innerBlocks"}
        node["innerBlocks"] = []
        ordered.append(node)
        if raw.get("clientId"):
            nodes[raw["clientId"]] = node

    roots: List[Dict[str, Any]] = []
    for node in ordered:
        parent = nodes.get(node.get("parentClientId") or "")
        if parent is not None and parent is not node:
            parent["innerBlocks"].append(node)
        else:
            roots.append(node)
    return roots


def _editor_blocks(v: Any) -> Any:
    v = _none_to_list(v)
    if isinstance(v, list) and any(isinstance(b, dict) and b.get("parentClientId") for b in v):
        return build_block_tree(v)
    return v


# ── Sous-objets ─────────────────────────────────────────────────────────────

class MediaDetails(_WPModel):
    width: Optional[int] = None
    height: Optional[int] = None


class MediaItem(_WPModel):
    id: Optional[str] = None
    source_url: Optional[str] = Field(default=None, alias="sourceUrl")
    alt_text: Optional[str] = Field(default=None, alias="altText")
    media_details: Optional[MediaDetails] = Field(default=None, alias="mediaDetails")


class MediaEdge(_WPModel):
    node: Optional[MediaItem] = None


class PageRef(_WPModel):
    id: Optional[str] = None
    title: Optional[str] = None
    uri: Optional[str] = None


class PageRefEdge(_WPModel):
    node: Optional[PageRef] = None


class PageRefConnection(_WPModel):
    nodes: List[PageRef] = Field(default_factory=list)

    _nodes = field_validator("nodes", mode="before")(lambda cls, v: _none_to_list(v))


class TermRef(_WPModel):
    id: Optional[str] = None
    name: Optional[str] = None
    slug: Optional[str] = None
    uri: Optional[str] = None


class TermConnection(_WPModel):
    nodes: List[TermRef] = Field(default_factory=list)

    _nodes = field_validator("nodes", mode="before")(lambda cls, v: _none_to_list(v))


class Avatar(_WPModel):
    url: Optional[str] = None


class Author(_WPModel):
    id: Optional[str] = None
    name: Optional[str] = None
    first_name: Optional[str] = Field(default=None, alias="firstName")
    last_name: Optional[str] = Field(default=None, alias="lastName")
    avatar: Optional[Avatar] = None


class AuthorEdge(_WPModel):
    node: Optional[Author] = None


class TemplateRef(_WPModel):
    template_name: Optional[str] = Field(default=None, alias="templateName")


class LinkField(_WPModel):
    url: Optional[str] = None
    title: Optional[str] = None
    target: Optional[str] = None


class ButtonItem(_WPModel):
    button: Optional[LinkField] = None


class AccordionItem(_WPModel):
    heading: Optional[str] = None
    content: Optional[str] = None
    default_state: Optional[str] = Field(default=None, alias="defaultState")


class FlexibleLayout(_WPModel):
    """Une rangée ACF Flexible Content (le type exact est dans `__typename`)."""
    typename: str = Field(default="", alias="__typename")
    field_group_name: Optional[str] = Field(default=None, alias="fieldGroupName")
    band_classes: Optional[str] = Field(default=None, alias="bandClasses")
    band_id: Optional[str] = Field(default=None, alias="bandId")
    # Hero / Heading / Wysiwyg
    background_image: Optional[MediaEdge] = Field(default=None, alias="backgroundImage")
    heading: Optional[str] = None
    subheading: Optional[str] = None
    content: Optional[str] = None
    text_alignment: Optional[str] = Field(default=None, alias="textAlignment")
    # CTA
    buttons: List[ButtonItem] = Field(default_factory=list)
    # Image
    image: Optional[MediaEdge] = None
    caption: Optional[str] = None
    link: Optional[LinkField] = None
    # Accordion
    accordion_items: List[AccordionItem] = Field(default_factory=list, alias="accordionItems")

    @field_validator("typename", mode="before")
    @classmethod
    def _typename(cls, v):
        return v or ""

    @field_validator("buttons", "accordion_items", mode="before")
    @classmethod
    def _lists(cls, v):
        return _none_to_list(v)


class AcfPageFields(_WPModel):
    template_type: Optional[str] = Field(default=None, alias="templateType")
    flexible_content: List[FlexibleLayout] = Field(default_factory=list, alias="flexibleContent")

    _fc = field_validator("flexible_content", mode="before")(lambda cls, v: _none_to_list(v))


class AcfContactFields(_WPModel):
    address: Optional[str] = None
    phone: Optional[str] = None
    email: Optional[str] = None
    hours: Optional[str] = None
    map_embed: Optional[str] = Field(default=None, alias="mapEmbed")


class CourseCredit(_WPModel):
    type: Optional[str] = None
    name: Optional[str] = None
    credits: Optional[str] = None

    @field_validator("credits", mode="before")
    @classmethod
    def _credits_str(cls, v):
        # l'API renvoie parfois un nombre
        return None if v is None else str(v)


class CourseMaterial(_WPModel):
    title: Optional[str] = None
    file: Optional[str] = None


class MasterCourseListFields(_WPModel):
    iar_approval_date: Optional[str] = Field(default=None, alias="iarApprovalDate")
    notes: Optional[str] = None


# ── Nœuds de contenu ────────────────────────────────────────────────────────

class ContentNodeBase(BaseModel):
    """Champs communs à tous les nœuds. Les champs inconnus sont conservés (extra)."""
    model_config = ConfigDict(populate_by_name=True, extra="allow")

    id: str
    database_id: Optional[int] = Field(default=None, alias="databaseId")
    uri: Optional[str] = None
    slug: Optional[str] = None
    status: Optional[str] = None
    date: Optional[str] = None
    modified: Optional[str] = None


class PageNode(ContentNodeBase):
    typename: Literal["Page"] = Field(default="Page", alias="__typename")
    title: Optional[str] = None
    content: Optional[str] = None
    featured_image: Optional[MediaEdge] = Field(default=None, alias="featuredImage")
    parent: Optional[PageRefEdge] = None
    children: Optional[PageRefConnection] = None
    template: Union[TemplateRef, str, None] = None
    page_template: Optional[str] = Field(default=None, alias="pageTemplate")
    acf_page_fields: Optional[AcfPageFields] = Field(default=None, alias="acfPageFields")
    acf_contact_fields: Optional[AcfContactFields] = Field(default=None, alias="acfContactFields")
    editor_blocks: List[Block] = Field(default_factory=list, alias="editorBlocks")

    _blocks = field_validator("editor_blocks", mode="before")(lambda cls, v: _editor_blocks(v))


class PostNode(ContentNodeBase):
    typename: Literal["Post"] = Field(default="Post", alias="__typename")
    title: Optional[str] = None
    content: Optional[str] = None
    excerpt: Optional[str] = None
    featured_image: Optional[MediaEdge] = Field(default=None, alias="featuredImage")
    categories: Optional[TermConnection] = None
    author: Optional[AuthorEdge] = None
    template: Union[TemplateRef, str, None] = None
    editor_blocks: List[Block] = Field(default_factory=list, alias="editorBlocks")

    _blocks = field_validator("editor_blocks", mode="before")(lambda cls, v: _editor_blocks(v))


class CourseNode(ContentNodeBase):
    typename: Literal["FlmsCourse"] = Field(default="FlmsCourse", alias="__typename")
    title: Optional[str] = None
    course_number: Optional[str] = Field(default=None, alias="courseNumber")
    course_description: Optional[str] = Field(default=None, alias="courseDescription")
    course_preview: Optional[str] = Field(default=None, alias="coursePreview")
    woo_product_id: Optional[int] = Field(default=None, alias="wooProductId")
    course_credits: List[Optional[CourseCredit]] = Field(default_factory=list, alias="courseCredits")
    course_materials: List[Optional[CourseMaterial]] = Field(default_factory=list, alias="courseMaterials")
    master_course_list_fields: Optional[MasterCourseListFields] = Field(default=None, alias="masterCourseListFields")

    @field_validator("course_number", mode="before")
    @classmethod
    def _number_str(cls, v):
        return None if v is None else str(v)

    @field_validator("course_credits", "course_materials", mode="before")
    @classmethod
    def _lists(cls, v):
        return _none_to_list(v)

    @property
    def credits(self) -> List[CourseCredit]:
        return [c for c in self.course_credits if c]

    @property
    def materials(self) -> List[CourseMaterial]:
        return [m for m in self.course_materials if m]


class CategoryNode(ContentNodeBase):
    typename: Literal["Category"] = Field(default="Category", alias="__typename")
    name: Optional[str] = None
    description: Optional[str] = None
    count: Optional[int] = None


class TagNode(CategoryNode):
    typename: Literal["Tag"] = Field(default="Tag", alias="__typename")


class GenericNode(ContentNodeBase):
    """Tout type non modélisé : on garde le tag et les champs usuels."""
    typename: Optional[str] = Field(default=None, alias="__typename")
    title: Optional[str] = None
    content: Optional[str] = None
    template: Union[TemplateRef, str, None] = None


ContentNode = Union[PageNode, PostNode, CourseNode, CategoryNode, TagNode, GenericNode]

_NODE_MODELS: Dict[str, type] = {
    ContentType.PAGE.value:     PageNode,
    ContentType.POST.value:     PostNode,
    ContentType.COURSE.value:   CourseNode,
    ContentType.CATEGORY.value: CategoryNode,
    ContentType.TAG.value:      TagNode,
}


def parse_content_node(data: Any) -> Optional[ContentNode]:
    """
    dict WPGraphQL → ContentNode typé.

    Type inconnu → GenericNode. Payload invalide pour son type → GenericNode
    (avertissement). Sans id ou pas un dict → None (traité comme « pas de données »).
    """
    if not isinstance(data, dict):
        return None

    typename = data.get("__typename")
    model = _NODE_MODELS.get(typename, GenericNode)
    try:
        return model.model_validate(data)
    except ValidationError as e:
        if model is not GenericNode:
            log.warning("Nœud %s invalide, rendu générique : %s", typename, e.errors()[:3])
        try:
            return GenericNode.model_validate(data)
        except ValidationError:
            log.warning("Nœud sans identifiant ignoré (type %r)", typename)
            return None
