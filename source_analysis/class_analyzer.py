"""
Analysis of the class under test: parse, describe every class, pick one, resolve imports.
"""

import logging
from typing import List, Union

from .class_extractor import extract_class_descriptor
from .class_selector import SelectionPolicy, select_class_under_test
from .import_resolver import resolve_import_paths, resolve_import_paths_from_tree
from .models import ClassDescriptor
from .ts_parser import find_class_nodes, parse_source

logger = logging.getLogger(__name__)

IMPORT_RESOLUTION_MODES = ('text', 'tree')


def read_class_descriptors(file_name: str, source: Union[str, bytes]) -> List[ClassDescriptor]:
    """Describe every class declared in the source, in document order."""
    tree = parse_source(file_name, source)
    return [extract_class_descriptor(node) for node in find_class_nodes(tree.root_node)]


def analyze_class_under_test(
    file_name: str,
    source: Union[str, bytes],
    import_resolution: str = 'text',
    selection_policy: SelectionPolicy = select_class_under_test
) -> ClassDescriptor:
    """
    Extract the facts needed to scaffold a spec for the class under test.

    Args:
        file_name: Name of the source file (diagnostics and grammar selection)
        source: Contents of the source file
        import_resolution: 'text' for the line heuristic, 'tree' for import bindings
        selection_policy: Picks the class under test among all classes of the file

    Returns:
        The selected class descriptor, its constructor params carrying import paths

    Raises:
        ParseError: If the source cannot be parsed
        NoClassFoundError: If the source declares no class
        ValueError: If import_resolution is not a known mode
    """
    if import_resolution not in IMPORT_RESOLUTION_MODES:
        raise ValueError(f"Unknown import resolution mode: {import_resolution}")

    tree = parse_source(file_name, source)
    # parse_source already rejected undecodable bytes
    text = source.decode('utf8') if isinstance(source, bytes) else source
    descriptors = [extract_class_descriptor(node) for node in find_class_nodes(tree.root_node)]
    selected = selection_policy(descriptors, file_name)
    logger.info(f"Class under test: {selected.name} ({len(descriptors)} class(es) in {file_name})")

    if import_resolution == 'tree':
        params = resolve_import_paths_from_tree(selected.constructor_params, tree.root_node)
    else:
        params = resolve_import_paths(selected.constructor_params, text)

    return selected.model_copy(update={'constructor_params': params})