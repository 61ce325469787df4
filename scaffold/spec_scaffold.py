"""
Spec scaffold generation module for turning the extracted facts into a .spec.ts file.
"""

import logging
from pathlib import Path
from typing import Dict, List, Sequence, Union

from config import scaffold_config
from markup_analysis import WidgetUsageResult
from source_analysis import ClassDescriptor, Param, SpecFileExistsError
from source_analysis.import_resolver import type_binding_name

logger = logging.getLogger(__name__)

ROUTER_TYPE = 'Router'
FORM_BUILDER_TYPE = 'FormBuilder'

TESTING_IMPORT = "import { ComponentFixture, TestBed, waitForAsync } from '@angular/core/testing';"
ROUTER_TESTING_IMPORT = "import { RouterTestingModule } from '@angular/router/testing';"
ROUTER_TESTING_MODULE = "RouterTestingModule.withRoutes([{ path: '**', redirectTo: '' }]),"


def normalized_name(source_path: Union[str, Path]) -> str:
    """File name without its last extension: example.component.ts -> example.component."""
    return Path(source_path).stem


def spec_file_name(source_path: Union[str, Path]) -> str:
    """Name of the spec for a source file: example.component.ts -> example.component.spec.ts."""
    return f"{normalized_name(source_path)}.spec.ts"


def markup_path(source_path: Union[str, Path]) -> Path:
    """Sibling template of a source file: example.component.ts -> example.component.html."""
    return Path(source_path).with_suffix('.html')


def _lower_first(text: str) -> str:
    return text[:1].lower() + text[1:]


def spy_name(param: Param) -> str:
    return f"{_lower_first(param.type)}Spy"


def to_declarations(params: Sequence[Param]) -> List[str]:
    """Spy (or real FormBuilder) declarations for every injected dependency except the Router."""
    declarations = []
    for p in params:
        if p.type == ROUTER_TYPE:
            continue
        if p.type == FORM_BUILDER_TYPE:
            declarations.append("const formBuilder: FormBuilder = new FormBuilder();")
        else:
            declarations.append(f"const {spy_name(p)}: Spy<{p.type}> = autoSpy({p.type});")
    return declarations


def to_providers(params: Sequence[Param]) -> List[str]:
    """Testing module providers for every injected dependency except the Router."""
    providers = []
    for p in params:
        if p.type == ROUTER_TYPE:
            continue
        if p.type == FORM_BUILDER_TYPE:
            providers.append("{ provide: FormBuilder, useValue: formBuilder },")
        else:
            providers.append(f"{{ provide: {p.type}, useValue: {spy_name(p)} }},")
    return providers


def to_router_imports(params: Sequence[Param]) -> List[str]:
    """The Router is provided through RouterTestingModule rather than a spy."""
    return [ROUTER_TESTING_MODULE for p in params if p.type == ROUTER_TYPE]


def to_constructor_args(params: Sequence[Param]) -> str:
    return ','.join(p.name for p in params)


def to_dependency_imports(params: Sequence[Param]) -> List[str]:
    """
    Import statements for the dependency types whose import path is known.

    Types imported from the same module share one statement; modules keep the
    order in which they are first seen.
    """
    by_module: Dict[str, List[str]] = {}
    for p in params:
        if not p.import_path:
            continue
        binding = type_binding_name(p.type)
        if binding is None:
            continue
        names = by_module.setdefault(p.import_path, [])
        if binding not in names:
            names.append(binding)
    return [f"import {{ {', '.join(names)} }} from '{module}';" for module, names in by_module.items()]


def render_spec(descriptor: ClassDescriptor, widgets: WidgetUsageResult, normalized: str) -> str:
    """
    Render the spec file for the class under test.

    Args:
        descriptor: Selected class with resolved constructor params
        widgets: Testing modules required by the component template
        normalized: Source file name without extension, used for the class import

    Returns:
        Contents of the spec file
    """
    indent = scaffold_config.get_indent()
    class_name = descriptor.name
    params = descriptor.constructor_params

    def block(level: int, lines: Sequence[str]) -> List[str]:
        return [f"{indent * level}{line}" for line in lines]

    declarations = to_declarations(params)
    spied = any(p.type not in (ROUTER_TYPE, FORM_BUILDER_TYPE) for p in params)
    router_imports = to_router_imports(params)

    # Imports
    scaffold = [TESTING_IMPORT, f"import {{ {class_name} }} from './{normalized}';"]
    scaffold.extend(to_dependency_imports(params))
    if spied:
        scaffold.append(f"import {{ autoSpy, Spy }} from '{scaffold_config.get_spy_import()}';")
    if router_imports:
        scaffold.append(ROUTER_TESTING_IMPORT)
    scaffold.extend(widgets.imports)
    scaffold.append("")

    # Test bed
    scaffold.append(f"describe('{class_name}', () => {{")
    scaffold.extend(block(1, [
        f"let component: {class_name};",
        f"let fixture: ComponentFixture<{class_name}>;",
    ]))
    scaffold.extend(block(1, declarations))
    scaffold.append("")
    scaffold.extend(block(1, ["beforeEach(waitForAsync(() => {"]))
    scaffold.extend(block(2, ["TestBed.configureTestingModule({"]))
    scaffold.extend(block(3, [f"declarations: [{class_name}],", "imports: ["]))
    scaffold.extend(block(4, [f"{item}," for item in widgets.declarations] + router_imports))
    scaffold.extend(block(3, ["],", "providers: ["]))
    scaffold.extend(block(4, to_providers(params)))
    scaffold.extend(block(3, ["]"]))
    scaffold.extend(block(2, ["}).compileComponents();"]))
    scaffold.extend(block(1, ["}));", ""]))
    scaffold.extend(block(1, ["beforeEach(() => {"]))
    scaffold.extend(block(2, [
        f"fixture = TestBed.createComponent({class_name});",
        "component = fixture.componentInstance;",
        "fixture.detectChanges();",
    ]))
    scaffold.extend(block(1, ["});", ""]))
    scaffold.extend(block(1, ["it('should create', () => {"]))
    scaffold.extend(block(2, ["expect(component).toBeTruthy();"]))
    scaffold.extend(block(1, ["});"]))

    # One describe per public method
    for method in descriptor.public_methods:
        scaffold.append("")
        scaffold.extend(block(1, [f"describe('when {method} is called', () => {{"]))
        scaffold.extend(block(2, ["it('should', () => {"]))
        scaffold.extend(block(3, [
            "// arrange",
            "// act",
            f"component.{method}();",
            "// assert",
            "// expect(component).toEqual",
        ]))
        scaffold.extend(block(2, ["});"]))
        scaffold.extend(block(1, ["});"]))

    scaffold.append("});")
    scaffold.append("")
    return "\n".join(scaffold)


def write_spec_file(directory: Union[str, Path], file_name: str, content: str, force: bool = False) -> Path:
    """
    Write the spec next to the class under test.

    Args:
        directory: Directory of the class under test
        file_name: Name of the spec file
        content: Rendered spec
        force: Overwrite an existing spec

    Returns:
        Path of the written spec

    Raises:
        SpecFileExistsError: If the spec exists and force is False
    """
    spec_path = Path(directory) / file_name
    if spec_path.exists() and not force:
        raise SpecFileExistsError(spec_path)
    if spec_path.exists():
        logger.warning(f"Overwriting existing spec file {spec_path}")

    spec_path.write_text(content, encoding='utf-8')
    scaffold_config.set_spec_file_path(str(spec_path))
    logger.info(f"Spec written to {spec_path}")
    return spec_path
