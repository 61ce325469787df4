"""Shared test fixtures for spec-scaffold tests."""

import sys
import textwrap
from pathlib import Path

import pytest

# Add the repository root to the path so tests can import the packages
sys.path.insert(0, str(Path(__file__).parent.parent))

from config import scaffold_config  # noqa: E402


@pytest.fixture(autouse=True)
def reset_config():
    """Keep the configuration singleton from leaking between tests."""
    yield
    scaffold_config.set_import_resolution('text')
    scaffold_config.set_spy_import('autoSpy')
    scaffold_config.set_indent('\t')
    scaffold_config.set_spec_file_path(None)


@pytest.fixture
def component_project(tmp_path):
    """An Angular component with a constructor dependency and a template."""
    folder = tmp_path / "example"
    folder.mkdir()
    (folder / "example.component.ts").write_text(
        textwrap.dedent("""\
        import { Component } from '@angular/core';
        import { BarService } from './bar.service';
        import { Router } from '@angular/router';

        @Component({
            selector: 'app-example',
            templateUrl: './example.component.html'
        })
        export class ExampleComponent {
            constructor(private svc: BarService, private router: Router) {}

            doThing() {
                this.svc.go();
            }

            private helper() {}
        }
        """)
    )
    (folder / "example.component.html").write_text(
        "<mat-toolbar><mat-icon>home</mat-icon></mat-toolbar>\n"
    )
    return folder
