import logging
from typing import Optional, Sequence

from .models import WidgetSignature, WidgetUsageResult
from .signatures import NOOP_ANIMATIONS_DECLARATION, NOOP_ANIMATIONS_IMPORT, WIDGET_SIGNATURES

logger = logging.getLogger(__name__)


def scan_widget_usage(
    markup: Optional[str],
    registry: Sequence[WidgetSignature] = WIDGET_SIGNATURES
) -> WidgetUsageResult:
    """
    Work out which testing modules the markup of a component needs.

    Every signature of the registry is checked in order and each one that fires
    appends its declarations and imports. Signatures are independent, so two of
    them sharing a marker both contribute. When anything fired, the
    NoopAnimationsModule pair closes both lists.

    Args:
        markup: Markup text; None or '' when the component has no template file
        registry: Ordered widget signatures to check

    Returns:
        The declarations and imports to add to the testing module
    """
    if not markup:
        return WidgetUsageResult()

    declarations = []
    imports = []
    for signature in registry:
        if signature.matches(markup):
            logger.debug(f"Widget {'/'.join(signature.markers)} found: {', '.join(signature.declarations)}")
            declarations.extend(signature.declarations)
            imports.extend(signature.imports)

    if declarations:
        declarations.append(NOOP_ANIMATIONS_DECLARATION)
        imports.append(NOOP_ANIMATIONS_IMPORT)

    return WidgetUsageResult(declarations=declarations, imports=imports)
