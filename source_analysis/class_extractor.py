"""
Class descriptor extraction from tree-sitter class nodes.
"""

import logging
from typing import List, Optional
from tree_sitter import Node

from .models import ClassDescriptor, Param
from .ts_parser import node_text

logger = logging.getLogger(__name__)

DEFAULT_CLASS_NAME = 'default'
DEFAULT_PARAM_TYPE = 'any'

METHOD_NODE_TYPES = ('method_definition', 'method_signature', 'abstract_method_signature')
PARAMETER_NODE_TYPES = ('required_parameter', 'optional_parameter')
NON_PUBLIC_MODIFIERS = ('private', 'protected')
ACCESSOR_KEYWORDS = ('get', 'set')


def _class_members(class_node: Node) -> List[Node]:
    body = class_node.child_by_field_name('body')
    if body is None:
        return []
    return list(body.named_children)


def _member_name(member: Node) -> str:
    return node_text(member.child_by_field_name('name'))


def _is_constructor(member: Node) -> bool:
    return member.type in METHOD_NODE_TYPES and _member_name(member) == 'constructor'


def _is_accessor(member: Node) -> bool:
    # get/set are anonymous keyword tokens sitting before the name
    name = member.child_by_field_name('name')
    for child in member.children:
        if name is not None and child.start_byte >= name.start_byte:
            break
        if not child.is_named and child.type in ACCESSOR_KEYWORDS:
            return True
    return False


def _accessibility(member: Node) -> Optional[str]:
    for child in member.children:
        if child.type == 'accessibility_modifier':
            return node_text(child)
    return None


def method_is_public(member: Node) -> bool:
    """A method is public unless it is marked private/protected or uses a #private name."""
    if _accessibility(member) in NON_PUBLIC_MODIFIERS:
        return False
    name = member.child_by_field_name('name')
    return name is None or name.type != 'private_property_identifier'


def _param_name(param: Node) -> str:
    pattern = param.child_by_field_name('pattern')
    if pattern is None:
        return node_text(param)
    if pattern.type == 'rest_pattern':
        # `...args` is named `args`
        inner = [child for child in pattern.named_children]
        if inner:
            return node_text(inner[0])
    return node_text(pattern)


def _param_type(param: Node) -> str:
    annotation = param.child_by_field_name('type')
    if annotation is None:
        return DEFAULT_PARAM_TYPE
    if annotation.named_children:
        type_text = node_text(annotation.named_children[0])
    else:
        type_text = node_text(annotation).lstrip(':').strip()
    return type_text or DEFAULT_PARAM_TYPE


def read_constructor_params(class_node: Node) -> List[Param]:
    """
    Read the parameters of the first constructor declared in the class.

    Only the first constructor is considered; overloads declared after it are
    ignored.

    Args:
        class_node: A class declaration node

    Returns:
        Ordered list of parameters, empty when the class has no constructor
    """
    for member in _class_members(class_node):
        if not _is_constructor(member):
            continue
        parameters = member.child_by_field_name('parameters')
        if parameters is None:
            return []
        return [
            Param(name=_param_name(p), type=_param_type(p))
            for p in parameters.named_children
            if p.type in PARAMETER_NODE_TYPES
        ]
    return []


def read_public_methods(class_node: Node) -> List[str]:
    """
    Read the names of the public methods declared directly in the class.

    Constructors, accessors and fields are not methods. Static and abstract
    methods count as public unless marked otherwise.

    Args:
        class_node: A class declaration node

    Returns:
        Method names in document order
    """
    public_methods = []
    for member in _class_members(class_node):
        if member.type not in METHOD_NODE_TYPES:
            continue
        if _is_constructor(member) or _is_accessor(member):
            continue
        if method_is_public(member):
            public_methods.append(_member_name(member))
    return public_methods


def extract_class_descriptor(class_node: Node) -> ClassDescriptor:
    """Build the descriptor (name, constructor params, public methods) of a class node."""
    name = node_text(class_node.child_by_field_name('name')) or DEFAULT_CLASS_NAME
    descriptor = ClassDescriptor(
        name=name,
        constructor_params=read_constructor_params(class_node),
        public_methods=read_public_methods(class_node),
    )
    logger.debug(
        f"Class {descriptor.name}: {len(descriptor.constructor_params)} constructor param(s), "
        f"{len(descriptor.public_methods)} public method(s)"
    )
    return descriptor
