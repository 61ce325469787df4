"""
Best-effort resolution of the module each constructor dependency is imported from.

Two strategies are available:

* ``resolve_import_paths`` scans the raw text for an import line mentioning the
  type. It is shallow on purpose and can mismatch when the type name is a
  substring of another imported symbol, when import statements overlap, or when
  the type is declared locally.
* ``resolve_import_paths_from_tree`` looks at the import statements of the
  parsed tree and matches the imported binding itself.

Neither ever raises; a miss leaves ``import_path`` unset.
"""

import re
import logging
from typing import Dict, List, Optional, Sequence
from tree_sitter import Node

from .models import Param
from .ts_parser import node_text

logger = logging.getLogger(__name__)

QUALIFIED_NAME_PATTERN = re.compile(r'[A-Za-z_$][\w$]*(?:\.[A-Za-z_$][\w$]*)*')


def find_import_path(type_name: str, full_text: str) -> Optional[str]:
    """
    Find the module specifier of the first import line that mentions the type.

    Args:
        type_name: Declared type text of the parameter
        full_text: Complete source text of the file

    Returns:
        The quoted module specifier, or None when no line matches
    """
    pattern = rf"import.*{re.escape(type_name)}.*from.*('|\")(.*)('|\")"
    match = re.search(pattern, full_text)
    return match.group(2) if match else None


def resolve_import_paths(params: Sequence[Param], full_text: str) -> List[Param]:
    """Attach the textually matched import path to each parameter."""
    resolved = []
    for param in params:
        import_path = find_import_path(param.type, full_text)
        if import_path is None:
            logger.debug(f"No import found for {param.name}: {param.type}")
        resolved.append(param.model_copy(update={'import_path': import_path}))
    return resolved


def _string_value(node: Node) -> str:
    fragments = [child for child in node.named_children if child.type == 'string_fragment']
    if fragments:
        return ''.join(node_text(f) for f in fragments)
    return node_text(node)[1:-1]


def _import_source(statement: Node) -> Optional[str]:
    source = statement.child_by_field_name('source')
    if source is None:
        # Fall back to the first string literal of the statement
        for child in statement.named_children:
            if child.type == 'string':
                source = child
                break
    return _string_value(source) if source is not None else None


def collect_import_bindings(root: Node) -> Dict[str, str]:
    """
    Map every locally bound import name to its module specifier.

    Named imports bind their alias when one is given, default and namespace
    imports bind their identifier. The first binding of a name wins.

    Args:
        root: Root node of the parsed file

    Returns:
        Dictionary of binding name -> module specifier
    """
    bindings = {}
    for statement in root.named_children:
        if statement.type != 'import_statement':
            continue
        module = _import_source(statement)
        if module is None:
            continue
        clause = next((c for c in statement.named_children if c.type == 'import_clause'), None)
        if clause is None:
            continue

        names = []
        for part in clause.named_children:
            if part.type == 'identifier':
                names.append(node_text(part))
            elif part.type == 'namespace_import':
                names.extend(node_text(c) for c in part.named_children if c.type == 'identifier')
            elif part.type == 'named_imports':
                for spec in part.named_children:
                    if spec.type != 'import_specifier':
                        continue
                    bound = spec.child_by_field_name('alias') or spec.child_by_field_name('name')
                    names.append(node_text(bound))

        for name in names:
            bindings.setdefault(name, module)
    return bindings


def type_binding_name(type_name: str) -> Optional[str]:
    """
    Reduce a type annotation to the identifier an import would bind.

    ``Foo<Bar>`` and ``Foo[]`` give ``Foo``; ``ns.Foo`` gives ``ns``.
    """
    match = QUALIFIED_NAME_PATTERN.match(type_name.strip())
    if not match:
        return None
    return match.group(0).split('.')[0]


def resolve_import_paths_from_tree(params: Sequence[Param], root: Node) -> List[Param]:
    """Attach the import path of the binding each parameter type refers to."""
    bindings = collect_import_bindings(root)
    resolved = []
    for param in params:
        binding = type_binding_name(param.type)
        import_path = bindings.get(binding) if binding else None
        if import_path is None:
            logger.debug(f"No import binding found for {param.name}: {param.type}")
        resolved.append(param.model_copy(update={'import_path': import_path}))
    return resolved
