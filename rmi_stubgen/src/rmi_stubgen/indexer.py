import logging
from dataclasses import dataclass, replace
from typing import Optional

import tree_sitter_java
from tree_sitter import Language, Node, Parser, Tree

from rmi_stubgen.models.ast_models import (
    Element,
    ElementKind,
    ExecutableElement,
    Parameter,
    TypeElement,
)
from rmi_stubgen.tree_sitter_helpers import find_child, node_point, node_text, read_modifiers
from rmi_stubgen.type_resolution import TypeResolver, count_dimensions

logger = logging.getLogger(__name__)

TYPE_DECLARATIONS = {
    "class_declaration": ElementKind.CLASS,
    "interface_declaration": ElementKind.INTERFACE,
    "enum_declaration": ElementKind.ENUM,
    "record_declaration": ElementKind.RECORD,
    "annotation_type_declaration": ElementKind.ANNOTATION_TYPE,
}

MEMBER_DECLARATIONS = {
    "method_declaration": ElementKind.METHOD,
    "constructor_declaration": ElementKind.CONSTRUCTOR,
    "compact_constructor_declaration": ElementKind.CONSTRUCTOR,
    "field_declaration": ElementKind.FIELD,
    "constant_declaration": ElementKind.FIELD,
    **TYPE_DECLARATIONS,
}


# --- Tree-sitter language loading -------------------------------------------

def load_java_language() -> Language:
    """
    Loads the Tree-sitter Java grammar shipped by the `tree_sitter_java` wheel.
    """
    return Language(tree_sitter_java.language())


@dataclass
class CompilationUnit:
    """One parsed .java file, kept until the round's elements are built."""
    path: Optional[str]
    source_bytes: bytes
    tree: Tree
    resolver: TypeResolver


# --- The Indexer -------------------------------------------------------------

class JavaIndexer:
    """
    Plays the annotation-processing host: parses Java sources and hands out
    the top-level declarations of the round as TypeElements.

    Indexing is two-phase. `index_source` only parses and records which types
    each file declares; `root_elements` builds the elements afterwards, so a
    type can be resolved against files indexed later in the round.
    """

    def __init__(self):
        self.language = load_java_language()
        self.parser = Parser(self.language)

        self.packages: set[str] = set()
        self.known_types: set[str] = set()  # qualified names declared in this round
        self.units: list[CompilationUnit] = []

    def parse(self, source_bytes: bytes) -> Tree:
        return self.parser.parse(source_bytes)

    def index_source(self, source: str, file_path: Optional[str] = None):
        """
        Parses a Java compilation unit and registers the types it declares.
        """
        source_bytes = source.encode("utf-8")
        tree = self.parse(source_bytes)
        root: Node = tree.root_node
        if root.has_error:
            logger.warning("Syntax errors in %s; declarations may be incomplete", file_path or "<source>")

        package = self._find_package(source_bytes, root) or ""
        if package:
            self.packages.add(package)

        resolver = TypeResolver(package=package, known_types=self.known_types)
        self._read_imports(source_bytes, root, resolver)

        self._register_types(source_bytes, root, package)

        self.units.append(CompilationUnit(file_path, source_bytes, tree, resolver))

    def root_elements(self) -> list[TypeElement]:
        """
        Top-level type declarations of every indexed unit, in indexing order.
        """
        elements = []
        for unit in self.units:
            for child in unit.tree.root_node.named_children:
                if child.type in TYPE_DECLARATIONS:
                    elements.append(self._build_type(unit, child))
        return elements

    # -- AST helpers ----------------------------------------------------------

    def _find_package(self, source_bytes: bytes, root: Node) -> Optional[str]:
        """
        Grabs the package name from a 'package_declaration' node if present.
        """
        decl = find_child(root, "package_declaration")
        if decl is None:
            return None
        for child in decl.named_children:
            if child.type in ("identifier", "scoped_identifier"):
                return node_text(source_bytes, child)
        return None

    def _read_imports(self, source_bytes: bytes, root: Node, resolver: TypeResolver):
        for decl in root.named_children:
            if decl.type != "import_declaration":
                continue
            # Static imports bring in members, not types.
            if find_child(decl, "static") is not None:
                continue
            name_node = find_child(decl, "identifier", "scoped_identifier")
            if name_node is None:
                continue
            name = node_text(source_bytes, name_node)
            if find_child(decl, "asterisk") is not None:
                resolver.on_demand_imports.append(name)
            else:
                resolver.single_imports[name.rsplit(".", 1)[-1]] = name

    def _register_types(self, source_bytes: bytes, node: Node, prefix: str):
        """Registers every type declared under `node`; member types as `Outer.Inner`."""
        for child in node.named_children:
            if child.type not in TYPE_DECLARATIONS:
                continue
            name_node = child.child_by_field_name("name")
            if name_node is None:
                continue
            name = node_text(source_bytes, name_node)
            qualified = f"{prefix}.{name}" if prefix else name
            self.known_types.add(qualified)
            body = child.child_by_field_name("body")
            if body is not None:
                self._register_types(source_bytes, body, qualified)

    def _type_parameters(self, source_bytes: bytes, node: Node) -> list[str]:
        params = node.child_by_field_name("type_parameters")
        if params is None:
            return []
        names = []
        for p in params.named_children:
            ident = find_child(p, "type_identifier", "identifier")
            if ident is not None:
                names.append(node_text(source_bytes, ident))
        return names

    def _build_type(self, unit: CompilationUnit, node: Node) -> TypeElement:
        source_bytes = unit.source_bytes
        name_node = node.child_by_field_name("name")
        modifiers, annotations = read_modifiers(source_bytes, node)
        line, _ = node_point(node)
        type_vars = self._type_parameters(source_bytes, node)
        simple = node_text(source_bytes, name_node) if name_node else "<anonymous>"
        # Member types of this type shadow imports and package types in its methods.
        scoped = replace(unit, resolver=replace(unit.resolver, enclosing=(unit.resolver.qualify(simple),)))

        enclosed: list[Element] = []
        body = node.child_by_field_name("body")
        if body is not None:
            for member in body.named_children:
                kind = MEMBER_DECLARATIONS.get(member.type)
                if kind is ElementKind.METHOD:
                    enclosed.append(self._build_method(scoped, member, type_vars))
                elif kind is not None:
                    enclosed.append(self._build_member(source_bytes, member, kind))

        return TypeElement(
            simple_name=simple,
            kind=TYPE_DECLARATIONS[node.type],
            modifiers=modifiers,
            annotations=annotations,
            source_path=unit.path,
            line=line,
            package=unit.resolver.package,
            enclosed=enclosed,
        )

    def _build_member(self, source_bytes: bytes, node: Node, kind: ElementKind) -> Element:
        """Non-method members only need enough shape for the collector to skip them."""
        name_node = node.child_by_field_name("name")
        if name_node is None:
            # field_declaration -> declarator -> name
            declarator = node.child_by_field_name("declarator")
            name_node = declarator.child_by_field_name("name") if declarator else None
        modifiers, annotations = read_modifiers(source_bytes, node)
        line, _ = node_point(node)
        return Element(
            simple_name=node_text(source_bytes, name_node) if name_node else "<anonymous>",
            kind=kind,
            modifiers=modifiers,
            annotations=annotations,
            line=line,
        )

    def _build_method(self, unit: CompilationUnit, node: Node, class_type_vars: list[str]) -> ExecutableElement:
        """
        Pulls out a method's name, return type, parameters and thrown types,
        each type rendered in canonical form.
        """
        source_bytes = unit.source_bytes
        resolver = unit.resolver
        type_vars = class_type_vars + self._type_parameters(source_bytes, node)

        name_node = node.child_by_field_name("name")
        method_name = node_text(source_bytes, name_node) if name_node else "<anonymous>"

        # `int values()[]` is legal Java; the trailing dimensions belong to the return type
        ret_node = node.child_by_field_name("type")
        return_type = resolver.render(source_bytes, ret_node, type_vars) if ret_node else "void"
        return_type += "[]" * count_dimensions(node.child_by_field_name("dimensions"))

        parameters = []
        params_node = node.child_by_field_name("parameters")
        if params_node is not None:
            for p in params_node.named_children:
                if p.type == "formal_parameter":
                    parameters.append(self._formal_parameter(unit, p, type_vars))
                elif p.type == "spread_parameter":
                    parameters.append(self._spread_parameter(unit, p, type_vars))

        thrown_types = []
        throws = find_child(node, "throws")
        if throws is not None:
            for t in throws.named_children:
                thrown_types.append(resolver.render(source_bytes, t, type_vars))

        modifiers, annotations = read_modifiers(source_bytes, node)
        line, _ = node_point(node)
        return ExecutableElement(
            simple_name=method_name,
            modifiers=modifiers,
            annotations=annotations,
            source_path=unit.path,
            line=line,
            return_type=return_type,
            parameters=parameters,
            thrown_types=thrown_types,
        )

    def _formal_parameter(self, unit: CompilationUnit, node: Node, type_vars: list[str]) -> Parameter:
        source_bytes = unit.source_bytes
        type_node = node.child_by_field_name("type")
        name_node = node.child_by_field_name("name")
        p_type = unit.resolver.render(source_bytes, type_node, type_vars) if type_node else "?"
        # C-style `int x[]`
        p_type += "[]" * count_dimensions(node.child_by_field_name("dimensions"))
        p_name = node_text(source_bytes, name_node) if name_node else "param"
        return Parameter(p_type, p_name)

    def _spread_parameter(self, unit: CompilationUnit, node: Node, type_vars: list[str]) -> Parameter:
        """`String... names` -> ("java.lang.String...", "names")."""
        source_bytes = unit.source_bytes
        type_node, p_name = None, "param"
        for child in node.named_children:
            if child.type == "variable_declarator":
                name_node = child.child_by_field_name("name")
                if name_node is not None:
                    p_name = node_text(source_bytes, name_node)
            elif type_node is None and child.type not in ("modifiers", "marker_annotation", "annotation"):
                type_node = child
        p_type = unit.resolver.render(source_bytes, type_node, type_vars) if type_node else "?"
        return Parameter(p_type + "...", p_name)
