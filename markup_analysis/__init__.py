"""
Markup analysis module for detecting the widgets a component template uses.
"""

from .models import WidgetSignature, WidgetUsageResult
from .signatures import WIDGET_SIGNATURES, NOOP_ANIMATIONS_DECLARATION, NOOP_ANIMATIONS_IMPORT
from .widget_scanner import scan_widget_usage

__all__ = [
    'WidgetSignature',
    'WidgetUsageResult',
    'WIDGET_SIGNATURES',
    'NOOP_ANIMATIONS_DECLARATION',
    'NOOP_ANIMATIONS_IMPORT',
    'scan_widget_usage'
]
