"""Tests for resolving where constructor dependency types are imported from."""

import textwrap

import pytest

from source_analysis.import_resolver import (
    collect_import_bindings,
    find_import_path,
    resolve_import_paths,
    resolve_import_paths_from_tree,
    type_binding_name,
)
from source_analysis.models import Param
from source_analysis.ts_parser import parse_source

SOURCE = textwrap.dedent("""\
import { Component } from '@angular/core';
import { BarService } from './bar.service';
import { Bar } from "./bar";
import Default from './default';
import * as models from '../models';
import { Remote as Local, Other } from './remote';
import { Store } from '@ngrx/store';

class Locally {}
""")


def _root(source=SOURCE):
    return parse_source("a.ts", source).root_node


class TestTextResolution:
    def test_single_quoted_import(self):
        assert find_import_path("BarService", SOURCE) == "./bar.service"

    def test_double_quoted_import(self):
        source = 'import { Foo } from "../foo/foo";\n'
        assert find_import_path("Foo", source) == "../foo/foo"

    def test_unmatched_type(self):
        assert find_import_path("Missing", SOURCE) is None

    def test_substring_of_earlier_import_matches_it(self):
        # Shallow by nature: Bar is found inside the BarService import line
        assert find_import_path("Bar", SOURCE) == "./bar.service"

    def test_locally_declared_type_is_a_miss(self):
        assert find_import_path("Locally", SOURCE) is None

    @pytest.mark.parametrize("type_name", ["Foo[]", "(a: string) => void", "Map<string, Foo>", "a|b"])
    def test_regex_characters_in_type_never_raise(self, type_name):
        assert find_import_path(type_name, SOURCE) is None

    def test_resolve_keeps_order_and_unsets_misses(self):
        params = [Param(name="svc", type="BarService"), Param(name="x"), Param(name="n", type="number")]
        resolved = resolve_import_paths(params, SOURCE)
        assert [p.name for p in resolved] == ["svc", "x", "n"]
        assert [p.import_path for p in resolved] == ["./bar.service", None, None]

    def test_single_import_round_trip(self):
        source = "import { T } from 'some/path';\nclass A { constructor(t: T) {} }\n"
        assert resolve_import_paths([Param(name="t", type="T")], source)[0].import_path == "some/path"


class TestTreeResolution:
    def test_bindings(self):
        bindings = collect_import_bindings(_root())
        assert bindings["BarService"] == "./bar.service"
        assert bindings["Bar"] == "./bar"
        assert bindings["Default"] == "./default"
        assert bindings["models"] == "../models"
        assert bindings["Local"] == "./remote"
        assert bindings["Other"] == "./remote"
        assert "Remote" not in bindings

    @pytest.mark.parametrize("type_name, expected", [
        ("Foo", "Foo"),
        ("Store<AppState>", "Store"),
        ("Foo[]", "Foo"),
        ("models.User", "models"),
        ("  Foo | null", "Foo"),
        ("{ a: string }", None),
    ])
    def test_type_binding_name(self, type_name, expected):
        assert type_binding_name(type_name) == expected

    def test_exact_binding_avoids_substring_match(self):
        resolved = resolve_import_paths_from_tree([Param(name="bar", type="Bar")], _root())
        assert resolved[0].import_path == "./bar"

    def test_namespace_alias_and_generic_types(self):
        params = [
            Param(name="user", type="models.User"),
            Param(name="local", type="Local"),
            Param(name="store", type="Store<AppState>"),
            Param(name="mine", type="Locally"),
            Param(name="raw"),
        ]
        resolved = resolve_import_paths_from_tree(params, _root())
        assert [p.import_path for p in resolved] == ["../models", "./remote", "@ngrx/store", None, None]
