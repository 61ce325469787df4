"""
Angular Material widget signatures, in the order they are checked.
"""

from typing import Tuple

from .models import WidgetSignature


def _material(marker, *modules: Tuple[str, str]) -> WidgetSignature:
    """Build a signature from (module name, import path) pairs."""
    markers = (marker,) if isinstance(marker, str) else tuple(marker)
    return WidgetSignature(
        markers=markers,
        declarations=tuple(name for name, _ in modules),
        imports=tuple(f"import {{ {name} }} from '{path}';" for name, path in modules)
    )


NOOP_ANIMATIONS_DECLARATION = 'NoopAnimationsModule'
NOOP_ANIMATIONS_IMPORT = "import { NoopAnimationsModule } from '@angular/platform-browser/animations';"

WIDGET_SIGNATURES: Tuple[WidgetSignature, ...] = (
    _material('mat-icon', ('MatIconModule', '@angular/material/icon')),
    _material('mat-toolbar', ('MatToolbarModule', '@angular/material/toolbar')),
    _material('mat-tab', ('MatTabsModule', '@angular/material/tabs')),
    _material(
        ('mat-button', 'mat-flat-button', 'mat-raised-button'),
        ('MatButtonModule', '@angular/material/button')
    ),
    _material(
        'mat-form-field',
        ('ReactiveFormsModule', '@angular/forms'),
        ('MatFormFieldModule', '@angular/material/form-field'),
        ('MatInputModule', '@angular/material/input')
    ),
    _material('mat-select', ('MatSelectModule', '@angular/material/select')),
    _material('mat-checkbox', ('MatCheckboxModule', '@angular/material/checkbox')),
    _material('mat-datepicker', ('MatDatepickerModule', '@angular/material/datepicker')),
    _material('mat-divider', ('MatDividerModule', '@angular/material/divider')),
    _material('mat-chip', ('MatChipsModule', '@angular/material/chips')),
    # Shares the mat-chip marker with the chips rule, both fire together
    _material('mat-chip', ('MatAutocompleteModule', '@angular/material/autocomplete')),
    _material('mat-card', ('MatCardModule', '@angular/material/card')),
    _material(
        'mat-table',
        ('MatTableModule', '@angular/material/table'),
        ('MatSortModule', '@angular/material/sort'),
        ('MatPaginatorModule', '@angular/material/paginator')
    ),
    _material('mat-menu', ('MatMenuModule', '@angular/material/menu')),
)
