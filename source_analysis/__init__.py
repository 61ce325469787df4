"""
Source analysis module for extracting the class under test from TypeScript files.
"""

from .errors import (
    ScaffoldError,
    ParseError,
    NoClassFoundError,
    MissingSourceFileError,
    SpecFileExistsError
)
from .models import ClassDescriptor, Param
from .ts_parser import parse_source, find_class_nodes, read_class_nodes
from .class_extractor import extract_class_descriptor
from .class_selector import select_class_under_test
from .import_resolver import resolve_import_paths, resolve_import_paths_from_tree
from .class_analyzer import analyze_class_under_test, read_class_descriptors

__all__ = [
    'ScaffoldError',
    'ParseError',
    'NoClassFoundError',
    'MissingSourceFileError',
    'SpecFileExistsError',
    'ClassDescriptor',
    'Param',
    'parse_source',
    'find_class_nodes',
    'read_class_nodes',
    'extract_class_descriptor',
    'select_class_under_test',
    'resolve_import_paths',
    'resolve_import_paths_from_tree',
    'analyze_class_under_test',
    'read_class_descriptors'
]
