"""
Résolution de template : (`__typename`, nœud) → fonction de template.

Ne lève jamais, ne renvoie jamais None :
  - pas de type → template par défaut ;
  - type non enregistré → avertissement + template par défaut ;
  - nom de template correspondant à un override (égalité exacte) → override ;
  - sinon → défaut du type.
"""
import logging
from typing import Any, Optional

from .default import default_template
from .registry import TemplateFn, TemplateRegistry

log = logging.getLogger(__name__)


def _field(node: Any, attr: str, key: str) -> Any:
    """Lecture tolérante : nœud pydantic (attr) ou dict brut WPGraphQL (key)."""
    if isinstance(node, dict):
        return node.get(key)
    return getattr(node, attr, None)


def get_template_name(node: Any) -> Optional[str]:
    """
    Nom de template demandé par le nœud, dans cet ordre :
    template.templateName, template (chaîne), pageTemplate, acfPageFields.templateType.
    """
    if node is None:
        return None

    template = _field(node, "template", "template")
    if template:
        if isinstance(template, str):
            return template
        name = _field(template, "template_name", "templateName")
        if name:
            return name

    page_template = _field(node, "page_template", "pageTemplate")
    if page_template:
        return page_template

    acf = _field(node, "acf_page_fields", "acfPageFields")
    if acf:
        template_type = _field(acf, "template_type", "templateType")
        if template_type:
            return template_type

    return None


def resolve_template(
    typename: Optional[str],
    node: Any,
    registry: TemplateRegistry,
    fallback: TemplateFn = default_template,
) -> TemplateFn:
    if not typename:
        return fallback

    entry = registry.get(typename)
    if entry is None:
        log.warning("Aucun template enregistré pour le type de contenu : %s", typename)
        return fallback

    return entry.get(get_template_name(node))
