"""
Blocs Gutenberg — registry + blocs core/* pris en charge.
"""
from .base import BlockAttributes, BlockStyle, css_classes, style_attr
from .registry import BlockDefinition, BlockRegistry, BlockRenderFn
from .text import (
    HeadingAttributes, ListAttributes, ListItemAttributes, ParagraphAttributes, QuoteAttributes,
    render_heading, render_list, render_list_item, render_paragraph, render_quote,
)
from .media import (
    EmbedAttributes, GalleryAttributes, ImageAttributes,
    embed_url, render_embed, render_gallery, render_image,
)
from .layout import (
    ButtonAttributes, ButtonsAttributes, ColumnAttributes, ColumnsAttributes,
    SeparatorAttributes, SpacerAttributes,
    render_button, render_buttons, render_column, render_columns, render_separator, render_spacer,
)

# nom Gutenberg → (renderer, modèle d'attributs)
CORE_BLOCKS = {
    # texte
    "core/paragraph":     (render_paragraph, ParagraphAttributes),
    "core/heading":       (render_heading,   HeadingAttributes),
    "core/list":          (render_list,      ListAttributes),
    "core/list-item":     (render_list_item, ListItemAttributes),
    "core/quote":         (render_quote,     QuoteAttributes),
    # média
    "core/image":         (render_image,     ImageAttributes),
    "core/gallery":       (render_gallery,   GalleryAttributes),
    "core/embed":         (render_embed,     EmbedAttributes),
    "core-embed/youtube": (render_embed,     EmbedAttributes),
    "core-embed/vimeo":   (render_embed,     EmbedAttributes),
    "core-embed/twitter": (render_embed,     EmbedAttributes),
    # mise en page
    "core/columns":       (render_columns,   ColumnsAttributes),
    "core/column":        (render_column,    ColumnAttributes),
    "core/buttons":       (render_buttons,   ButtonsAttributes),
    "core/button":        (render_button,    ButtonAttributes),
    "core/separator":     (render_separator, SeparatorAttributes),
    "core/spacer":        (render_spacer,    SpacerAttributes),
}


def create_default_registry() -> BlockRegistry:
    """Registry neuf avec tous les blocs core/* enregistrés."""
    registry = BlockRegistry()
    for name, (render, attributes) in CORE_BLOCKS.items():
        registry.register(name, render, attributes)
    return registry


__all__ = [
    "BlockAttributes", "BlockStyle", "css_classes", "style_attr",
    "BlockDefinition", "BlockRegistry", "BlockRenderFn",
    "CORE_BLOCKS", "create_default_registry", "embed_url",
]
