from typing import Callable, Sequence

from .errors import NoClassFoundError
from .models import ClassDescriptor

# (descriptors, file_name) -> the class to build the spec for
SelectionPolicy = Callable[[Sequence[ClassDescriptor], str], ClassDescriptor]


def select_class_under_test(descriptors: Sequence[ClassDescriptor], file_name: str) -> ClassDescriptor:
    """
    Pick the class to spec: the first one with constructor params, or else the first one.

    Args:
        descriptors: Descriptors of every class in the file, in document order
        file_name: Name of the file, reported when no class exists

    Returns:
        The selected descriptor

    Raises:
        NoClassFoundError: If the file declares no class
    """
    for descriptor in descriptors:
        if descriptor.constructor_params:
            return descriptor
    if not descriptors:
        raise NoClassFoundError(file_name)
    return descriptors[0]
