"""
TypeScript parsing and class discovery on top of tree-sitter.
"""

import logging
from typing import List, Optional, Union
from tree_sitter import Language, Parser, Node, Tree
import tree_sitter_typescript    # <- comes from pip install tree-sitter-typescript

from .errors import ParseError

TS_LANG = Language(tree_sitter_typescript.language_typescript())
TSX_LANG = Language(tree_sitter_typescript.language_tsx())

CLASS_NODE_TYPES = ('class_declaration', 'abstract_class_declaration')

logger = logging.getLogger(__name__)


def node_text(node: Optional[Node]) -> str:
    """Return the source text covered by a node ('' for None)."""
    if node is None or node.text is None:
        return ''
    return node.text.decode('utf8')


def _language_for(file_name: str) -> Language:
    return TSX_LANG if str(file_name).lower().endswith('.tsx') else TS_LANG


def _first_error_node(root: Node) -> Optional[Node]:
    """Find the first ERROR or MISSING node in document order."""
    stack = [root]
    while stack:
        node = stack.pop()
        if node.type == 'ERROR' or node.is_missing:
            return node
        # Only descend into subtrees that actually contain an error
        stack.extend(child for child in reversed(node.children) if child.has_error or child.is_missing)
    return None


def parse_source(file_name: str, source: Union[str, bytes]) -> Tree:
    """
    Parse TypeScript source into a syntax tree.

    Args:
        file_name: Name of the file, used for diagnostics and to pick the TSX grammar
        source: Contents of the file, as text or raw UTF-8 bytes

    Returns:
        The tree-sitter Tree

    Raises:
        ParseError: If the contents are not valid UTF-8 or contain syntax errors
    """
    if isinstance(source, bytes):
        try:
            source = source.decode('utf8')
        except UnicodeDecodeError as e:
            raise ParseError(file_name, 1, e.start + 1, reason="invalid UTF-8") from e

    parser = Parser(_language_for(file_name))
    tree = parser.parse(bytes(source, 'utf8'))

    if tree.root_node.has_error:
        bad = _first_error_node(tree.root_node) or tree.root_node
        row, column = bad.start_point
        reason = f"missing {bad.type}" if bad.is_missing else "syntax error"
        raise ParseError(file_name, row + 1, column + 1, reason=reason)

    return tree


def is_class_node(node: Node) -> bool:
    """Whether the node declares a class (named, abstract or anonymous default export)."""
    if node.type in CLASS_NODE_TYPES:
        return True
    # `export default class { }` parses as a class expression under the export
    return node.type == 'class' and node.parent is not None and node.parent.type == 'export_statement'


def find_class_nodes(root: Node) -> List[Node]:
    """
    Collect every class declaration in the tree, in document order.

    The walk is a pre-order depth-first traversal driven by an explicit stack,
    so classes inside namespaces, functions, other classes or expressions are
    found as well and deeply nested input cannot exhaust the recursion limit.

    Args:
        root: Root node of the tree (or any subtree)

    Returns:
        Flat list of class declaration nodes
    """
    classes = []
    stack = [root]
    while stack:
        node = stack.pop()
        if is_class_node(node):
            classes.append(node)
        # Push children reversed so the leftmost child is visited first
        stack.extend(reversed(node.children))

    logger.debug(f"Found {len(classes)} class declaration(s)")
    return classes


def read_class_nodes(file_name: str, source: Union[str, bytes]) -> List[Node]:
    """Parse the source and return its class declaration nodes."""
    return find_class_nodes(parse_source(file_name, source).root_node)
