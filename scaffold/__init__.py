"""
Scaffold module for rendering and writing spec files.
"""

from .spec_scaffold import (
    normalized_name,
    spec_file_name,
    markup_path,
    render_spec,
    write_spec_file
)

__all__ = [
    'normalized_name',
    'spec_file_name',
    'markup_path',
    'render_spec',
    'write_spec_file'
]
