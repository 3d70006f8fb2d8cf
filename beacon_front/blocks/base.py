"""
Base des blocs Gutenberg : modèle d'attributs commun + helpers HTML.

Chaque bloc = un modèle d'attributs (lenient, clés inconnues ignorées)
+ une fonction de rendu `(attrs, inner_html, class_name) -> str`.
`inner_html` vaut None quand le bloc n'a pas d'enfants.
"""
import json
from html import escape
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


# ── Styles Gutenberg (attributes.style) ─────────────────────────────────────

class _StyleModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")


class ColorStyle(_StyleModel):
    text: Optional[str] = None
    background: Optional[str] = None


class TypographyStyle(_StyleModel):
    font_size: Optional[str] = Field(default=None, alias="fontSize")
    line_height: Optional[str] = Field(default=None, alias="lineHeight")
    font_weight: Optional[str] = Field(default=None, alias="fontWeight")


class Padding(_StyleModel):
    top: Optional[str] = None
    right: Optional[str] = None
    bottom: Optional[str] = None
    left: Optional[str] = None


class SpacingStyle(_StyleModel):
    block_gap: Optional[str] = Field(default=None, alias="blockGap")
    padding: Optional[Padding] = None


class BorderStyle(_StyleModel):
    radius: Optional[str] = None
    width: Optional[str] = None
    color: Optional[str] = None


class BlockStyle(_StyleModel):
    color: ColorStyle = ColorStyle()
    typography: TypographyStyle = TypographyStyle()
    spacing: SpacingStyle = SpacingStyle()
    border: BorderStyle = BorderStyle()

    @field_validator("color", "typography", "spacing", "border", mode="before")
    @classmethod
    def _none_to_empty(cls, v):
        return {} if v is None else v


class BlockAttributes(BaseModel):
    """Attributs communs à tous les blocs (classe parente des modèles d'attributs)."""
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    class_name: Optional[str] = Field(default=None, alias="className")
    style: BlockStyle = BlockStyle()

    @field_validator("style", mode="before")
    @classmethod
    def _style_or_empty(cls, v):
        return json_object(v)


def json_object(v: Any) -> Dict[str, Any]:
    """WPGraphQL Content Blocks sérialise `style` / `layout` en JSON : chaîne ou dict → dict."""
    if isinstance(v, str):
        try:
            v = json.loads(v)
        except ValueError:
            return {}
    return v if isinstance(v, dict) else {}


# ── Helpers HTML ────────────────────────────────────────────────────────────

def css_classes(*parts: Optional[str]) -> str:
    """Concatène les classes non vides (espaces normalisés)."""
    return " ".join(" ".join(p.split()) for p in parts if p and p.strip())


def style_attr(declarations: Dict[str, Any]) -> str:
    """{"color": "#fff", ...} → ' style="color:#fff;..."' (vide si rien)."""
    decls = [f"{k}:{v}" for k, v in declarations.items() if v not in (None, "")]
    if not decls:
        return ""
    return f' style="{escape(";".join(decls))}"'


def html_attr(name: str, value: Any) -> str:
    if value is None or value == "" or value is False:
        return ""
    if value is True:
        return f" {name}"
    return f' {name}="{escape(str(value))}"'


def padding_declarations(padding: Optional[Padding]) -> Dict[str, Optional[str]]:
    if padding is None:
        return {}
    return {
        "padding-top":    padding.top,
        "padding-right":  padding.right,
        "padding-bottom": padding.bottom,
        "padding-left":   padding.left,
    }


def figcaption(caption: Optional[str], css: str = "text-center text-slate-500 text-sm mt-3") -> str:
    # la légende est du HTML WordPress (liens, emphases)
    return f'<figcaption class="{css}">{caption}</figcaption>' if caption else ""


# Alignement des médias (image, embed)
MEDIA_ALIGN_CLASSES = {
    "left":   "mr-auto",
    "center": "mx-auto",
    "right":  "ml-auto",
    "wide":   "w-full max-w-4xl mx-auto",
    "full":   "w-full",
}
