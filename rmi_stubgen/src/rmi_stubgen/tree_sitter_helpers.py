# --- Tree-sitter plumbing ----------------------------------------------------
from typing import Optional

from tree_sitter import Node

ANNOTATION_NODES = ("marker_annotation", "annotation")


def node_text(source_bytes: bytes, node) -> str:
    """
    Converts a node's [start_byte:end_byte] into the corresponding string.
    Tree-sitter nodes only store byte offsets, so we slice the original source.
    """
    return source_bytes[node.start_byte:node.end_byte].decode("utf-8", errors="replace")


def node_point(node) -> tuple[int, int]:
    """
    Returns the (line, column) of a node's start in 0-based coordinates.
    """
    return (node.start_point[0], node.start_point[1])


def find_child(node: Node, *types: str) -> Optional[Node]:
    """First direct child whose type is one of `types`."""
    for child in node.children:
        if child.type in types:
            return child
    return None


def read_modifiers(source_bytes: bytes, decl: Node) -> tuple[frozenset[str], tuple[str, ...]]:
    """
    Splits a declaration's `modifiers` node into keyword modifiers
    (public, static, ...) and annotation names as written (Remote, javax.ejb.Local).
    """
    mods = find_child(decl, "modifiers")
    if mods is None:
        return frozenset(), ()

    keywords = set()
    annotations = []
    for child in mods.children:
        if child.type in ANNOTATION_NODES:
            name_node = child.child_by_field_name("name")
            if name_node is not None:
                annotations.append(node_text(source_bytes, name_node))
        elif not child.is_named:
            keywords.add(child.type)
    return frozenset(keywords), tuple(annotations)
