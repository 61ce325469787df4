"""Tests for detecting Angular Material widgets in component templates."""

import pytest
from pydantic import ValidationError

from markup_analysis import (
    NOOP_ANIMATIONS_DECLARATION,
    NOOP_ANIMATIONS_IMPORT,
    WIDGET_SIGNATURES,
    WidgetSignature,
    WidgetUsageResult,
    scan_widget_usage,
)

ICON_IMPORT = "import { MatIconModule } from '@angular/material/icon';"


class TestScanWidgetUsage:
    @pytest.mark.parametrize("markup", [None, "", "<div><span>plain</span></div>"])
    def test_no_widgets(self, markup):
        assert scan_widget_usage(markup) == WidgetUsageResult(declarations=[], imports=[])

    def test_icon(self):
        result = scan_widget_usage("<mat-icon></mat-icon>")
        assert result.declarations == ["MatIconModule", NOOP_ANIMATIONS_DECLARATION]
        assert result.imports == [ICON_IMPORT, NOOP_ANIMATIONS_IMPORT]

    def test_registry_order_not_markup_order(self):
        result = scan_widget_usage("<mat-menu></mat-menu><mat-icon></mat-icon>")
        assert result.declarations == ["MatIconModule", "MatMenuModule", NOOP_ANIMATIONS_DECLARATION]

    def test_alternative_markers(self):
        for markup in ('<button mat-button>', '<button mat-flat-button>', '<button mat-raised-button>'):
            assert scan_widget_usage(markup).declarations == ["MatButtonModule", NOOP_ANIMATIONS_DECLARATION]

    def test_one_rule_contributes_several_entries(self):
        result = scan_widget_usage("<mat-form-field><input matInput></mat-form-field>")
        assert result.declarations == [
            "ReactiveFormsModule", "MatFormFieldModule", "MatInputModule", NOOP_ANIMATIONS_DECLARATION
        ]
        assert result.imports == [
            "import { ReactiveFormsModule } from '@angular/forms';",
            "import { MatFormFieldModule } from '@angular/material/form-field';",
            "import { MatInputModule } from '@angular/material/input';",
            NOOP_ANIMATIONS_IMPORT,
        ]

    def test_shared_chip_marker_fires_chips_and_autocomplete(self):
        result = scan_widget_usage("<mat-chip-list><mat-chip>a</mat-chip></mat-chip-list>")
        assert result.declarations == ["MatChipsModule", "MatAutocompleteModule", NOOP_ANIMATIONS_DECLARATION]

    def test_table_marker_also_contains_tab_marker(self):
        result = scan_widget_usage("<table mat-table [dataSource]='rows'></table>")
        assert result.declarations == [
            "MatTabsModule", "MatTableModule", "MatSortModule", "MatPaginatorModule", NOOP_ANIMATIONS_DECLARATION
        ]

    def test_terminal_pair_is_last(self):
        markup = "<mat-toolbar></mat-toolbar><mat-card></mat-card><mat-select></mat-select><mat-divider>"
        result = scan_widget_usage(markup)
        assert result.declarations[-1] == NOOP_ANIMATIONS_DECLARATION
        assert result.imports[-1] == NOOP_ANIMATIONS_IMPORT
        assert result.declarations.count(NOOP_ANIMATIONS_DECLARATION) == 1

    def test_scanning_twice_gives_the_same_result(self):
        markup = "<mat-checkbox></mat-checkbox><mat-datepicker></mat-datepicker><mat-chip>"
        first = scan_widget_usage(markup)
        second = scan_widget_usage(markup)
        assert first == second
        assert len(first.declarations) == len(second.declarations)

    def test_custom_registry(self):
        registry = (
            WidgetSignature(markers=("x-one",), declarations=("OneModule",), imports=("import one;",)),
            WidgetSignature(markers=("x-two", "x-2"), declarations=(), imports=("import two;",)),
        )
        result = scan_widget_usage("<x-2></x-2>", registry=registry)
        # Nothing declared, so no terminal pair either
        assert result.declarations == []
        assert result.imports == ["import two;"]

        result = scan_widget_usage("<x-one><x-two>", registry=registry)
        assert result.declarations == ["OneModule", NOOP_ANIMATIONS_DECLARATION]
        assert result.imports == ["import one;", "import two;", NOOP_ANIMATIONS_IMPORT]


class TestSignatureRegistry:
    def test_registry_is_immutable(self):
        assert isinstance(WIDGET_SIGNATURES, tuple)
        with pytest.raises(ValidationError):
            WIDGET_SIGNATURES[0].markers = ("mat-other",)

    def test_every_declaration_has_an_import(self):
        for signature in WIDGET_SIGNATURES:
            assert len(signature.declarations) == len(signature.imports)
            for name, statement in zip(signature.declarations, signature.imports):
                assert f"{{ {name} }}" in statement

    def test_signature_needs_a_marker(self):
        with pytest.raises(ValidationError):
            WidgetSignature(markers=(), declarations=(), imports=())
