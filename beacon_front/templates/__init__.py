"""
Templates de page — registry, résolution, et templates par type de contenu.
"""
from ..core.schemas import ContentType, GenericNode
from .base import RenderContext, node_metadata
from .category import category_template
from .contact import contact_template
from .course import course_template
from .default import default_template
from .landing import landing_template
from .page import page_template
from .post import post_template
from .registry import TemplateFn, TemplateRegistration, TemplateRegistry
from .resolver import get_template_name, resolve_template

# Noms de template WordPress (slug de fichier ou libellé) → override Page
PAGE_TEMPLATES = {
    "template-landing": landing_template,
    "template-contact": contact_template,
    "Landing Page":     landing_template,
    "Contact Page":     contact_template,
}

_TYPED = {t.value for t in ContentType}


def create_default_templates() -> TemplateRegistry:
    registry = TemplateRegistry()
    registry.register_template(ContentType.PAGE.value, page_template)
    for name, template in PAGE_TEMPLATES.items():
        registry.register_template(ContentType.PAGE.value, template, name)
    registry.register_template(ContentType.POST.value, post_template)
    registry.register_template(ContentType.COURSE.value, course_template)
    registry.register_template(ContentType.CATEGORY.value, category_template)
    # les étiquettes réutilisent le template catégorie
    registry.register_template(ContentType.TAG.value, category_template)
    return registry


def render_node(node, ctx: RenderContext, registry: TemplateRegistry) -> str:
    """Résout puis applique le template du nœud."""
    typename = getattr(node, "typename", None)
    if isinstance(node, GenericNode) and typename in _TYPED:
        # payload invalide pour son type : champs typés indisponibles
        return default_template(node, ctx)
    template = resolve_template(typename, node, registry)
    return template(node, ctx)


__all__ = [
    "RenderContext", "node_metadata",
    "TemplateFn", "TemplateRegistration", "TemplateRegistry",
    "get_template_name", "resolve_template", "create_default_templates", "render_node",
    "default_template", "page_template", "post_template", "course_template",
    "category_template", "landing_template", "contact_template",
]
