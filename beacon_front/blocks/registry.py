"""
Registry des blocs — nom de bloc Gutenberg (ex. "core/paragraph") → définition.

Construit une fois au démarrage de l'app (voir create_default_registry) puis injecté ;
les tests instancient leur propre registry.
"""
import logging
from typing import Any, Callable, Dict, List, Optional, Type

from pydantic import BaseModel

from .base import BlockAttributes

log = logging.getLogger(__name__)

# (attrs validés, HTML des enfants ou None, className) → HTML
BlockRenderFn = Callable[[Any, Optional[str], str], str]


class BlockDefinition(BaseModel):
    name: str
    render: BlockRenderFn
    attributes: Type[BlockAttributes] = BlockAttributes

    def parse_attributes(self, raw: Dict[str, Any]) -> BlockAttributes:
        """Bag brut → modèle typé. Lève pydantic.ValidationError si le bag est invalide."""
        return self.attributes.model_validate(raw or {})


class BlockRegistry:
    """
    Registry des renderers de blocs.

    Usage:
        >>> registry = BlockRegistry()
        >>> registry.register("acme/notice", render_notice, NoticeAttributes)
        >>> registry.has("acme/notice")
        True
    """

    def __init__(self):
        self._blocks: Dict[str, BlockDefinition] = {}

    def register(
        self,
        name: str,
        render: BlockRenderFn,
        attributes: Type[BlockAttributes] = BlockAttributes,
    ) -> None:
        """Ajoute ou remplace (le dernier enregistrement gagne)."""
        if not name:
            log.warning("Enregistrement de bloc ignoré : nom vide")
            return
        if name in self._blocks:
            log.debug("Bloc %s remplacé", name)
        self._blocks[name] = BlockDefinition(name=name, render=render, attributes=attributes)

    def get(self, name: str) -> Optional[BlockDefinition]:
        return self._blocks.get(name)

    def has(self, name: str) -> bool:
        return name in self._blocks

    def list_registered(self) -> List[str]:
        return list(self._blocks)

    def __len__(self) -> int:
        return len(self._blocks)
