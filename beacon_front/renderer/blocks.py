"""
Block renderer — arbre de blocs Gutenberg → HTML.

Pour chaque bloc, dans l'ordre :
  1. renderer enregistré → enfants rendus d'abord (profondeur, dans l'ordre),
     puis le parent reçoit leur HTML concaténé (None si aucun enfant) ;
  2. sinon renderedHtml tel quel, sinon originalContent tel quel ;
  3. sinon "" (avertissement hors production).

Total : aucune donnée de bloc ne fait lever d'exception.
"""
import logging
from typing import Any, Iterable, Optional, Union

from pydantic import ValidationError

from .. import config
from ..blocks.registry import BlockRegistry
from ..core.schemas import Block
from .content import render_content

log = logging.getLogger(__name__)

BlockLike = Union[Block, dict]


def _as_block(block: BlockLike) -> Optional[Block]:
    if isinstance(block, Block):
        return block
    try:
        return Block.model_validate(block)
    except ValidationError:
        log.warning("Bloc illisible ignoré : %r", block)
        return None


def _fallback_html(block: Block, reason: str) -> str:
    if block.rendered_html:
        return block.rendered_html
    if block.original_content:
        return block.original_content
    if not config.is_production():
        log.warning("%s : %s (aucun HTML de repli)", reason, block.name or "<sans nom>")
    return ""


def render_block(block: BlockLike, registry: BlockRegistry) -> str:
    """Rend un bloc et son sous-arbre."""
    block = _as_block(block)
    if block is None:
        return ""

    definition = registry.get(block.name)
    if definition is None:
        return _fallback_html(block, "Bloc inconnu")

    try:
        attrs = definition.parse_attributes(block.attributes)
    except ValidationError as e:
        log.warning("Attributs invalides pour %s : %s", block.name, e.errors()[:3])
        return _fallback_html(block, "Bloc non rendu")

    inner_html = None
    if block.inner_blocks:
        inner_html = "".join(render_block(child, registry) for child in block.inner_blocks)

    try:
        return definition.render(attrs, inner_html, attrs.class_name or "")
    except Exception:
        # renderer tiers défaillant : on retombe sur le HTML WordPress
        log.exception("Échec du renderer %s", block.name)
        return _fallback_html(block, "Bloc non rendu")


def render_blocks(
    blocks: Optional[Iterable[BlockLike]],
    registry: BlockRegistry,
    fallback_content: Optional[str] = None,
    class_name: str = "",
    **content_options: Any,
) -> str:
    """
    Rend une séquence de blocs racine.

    Séquence vide → render_content(fallback_content) ou "".
    `content_options` (size, max_width, tag) ne servent qu'au repli HTML.
    """
    blocks = list(blocks or [])
    if not blocks:
        return render_content(fallback_content, class_name=class_name, **content_options)

    html = "".join(render_block(b, registry) for b in blocks)
    if class_name:
        return f'<div class="{class_name}">{html}</div>'
    return html
