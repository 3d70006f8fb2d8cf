from .schemas import (
    Block, ContentNode, ContentType, CourseNode, GenericNode, PageNode, PostNode,
    build_block_tree, parse_content_node,
)

__all__ = [
    "Block", "ContentNode", "ContentType", "CourseNode", "GenericNode", "PageNode", "PostNode",
    "build_block_tree", "parse_content_node",
]
