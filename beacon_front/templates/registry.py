"""
Registry des templates — type de contenu (`__typename`) → template par défaut
+ overrides nommés (nom de template WordPress / ACF).
"""
from typing import Any, Callable, Dict, List, Optional

from pydantic import BaseModel, Field

# (node, ctx) → fragment HTML
TemplateFn = Callable[[Any, Any], str]


class TemplateRegistration(BaseModel):
    """Un type de contenu : exactement un template par défaut + overrides nommés."""
    default: TemplateFn
    templates: Dict[str, TemplateFn] = Field(default_factory=dict)

    def get(self, template_name: Optional[str]) -> TemplateFn:
        """Override correspondant (égalité exacte) sinon défaut."""
        if template_name and template_name in self.templates:
            return self.templates[template_name]
        return self.default


class TemplateRegistry:
    """
    Usage:
        >>> registry = TemplateRegistry()
        >>> registry.register_template("Page", page_template)
        >>> registry.register_template("Page", landing_template, "template-landing")
    """

    def __init__(self):
        self._entries: Dict[str, TemplateRegistration] = {}

    def register_template(
        self,
        content_type: str,
        template: TemplateFn,
        template_name: Optional[str] = None,
    ) -> None:
        entry = self._entries.get(content_type)
        if entry is None:
            # premier enregistrement du type : il devient aussi le défaut
            entry = TemplateRegistration(default=template)
            self._entries[content_type] = entry
        if template_name:
            entry.templates[template_name] = template
        else:
            entry.default = template

    def get(self, content_type: str) -> Optional[TemplateRegistration]:
        return self._entries.get(content_type)

    def has_template(self, content_type: str, template_name: Optional[str] = None) -> bool:
        entry = self._entries.get(content_type)
        if entry is None:
            return False
        if template_name is None:
            return True
        return template_name in entry.templates

    def content_types(self) -> List[str]:
        return list(self._entries)
