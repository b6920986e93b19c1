"""Shared fixtures: a fresh Java indexer and small element builders."""

from __future__ import annotations

import pytest

from rmi_stubgen.indexer import JavaIndexer
from rmi_stubgen.models.ast_models import ElementKind, ExecutableElement, Parameter, TypeElement
from rmi_stubgen.outputs.filer import Filer


@pytest.fixture
def indexer():
    return JavaIndexer()


@pytest.fixture
def filer(tmp_path):
    return Filer(tmp_path / "rmi")


@pytest.fixture
def elements_of(indexer):
    """Parse one or more Java sources and return the round's root elements by simple name."""
    def _parse(*sources: str) -> dict[str, TypeElement]:
        for i, src in enumerate(sources):
            indexer.index_source(src, f"Source{i}.java")
        return {e.simple_name: e for e in indexer.root_elements()}
    return _parse


def method(name, *params, returns="void", throws=(), modifiers=("public",), annotations=()):
    """Build a method element; params are (type, name) pairs."""
    return ExecutableElement(
        simple_name=name,
        modifiers=frozenset(modifiers),
        annotations=tuple(annotations),
        return_type=returns,
        parameters=[Parameter(t, n) for t, n in params],
        thrown_types=list(throws),
    )


def type_element(name, *members, kind=ElementKind.INTERFACE, package="com.acme", annotations=()):
    return TypeElement(
        simple_name=name,
        kind=kind,
        package=package,
        annotations=tuple(annotations),
        enclosed=list(members),
        source_path=f"{name}.java",
    )
