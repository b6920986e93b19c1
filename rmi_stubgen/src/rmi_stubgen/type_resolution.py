"""
Renders Tree-sitter Java type nodes the way javac prints a TypeMirror:
fully-qualified class names, `,`-joined type arguments, `[]` for arrays
and `...` for varargs.

We have no classpath, so resolution is syntax-only: member types of the
enclosing type, imports, the types declared by the sources indexed in the
same round, and the JDK names listed in jdk_types.
"""
from dataclasses import dataclass, field
from typing import Iterable, Optional

from tree_sitter import Node

from rmi_stubgen.jdk_types import JAVA_LANG, WELL_KNOWN_PACKAGES
from rmi_stubgen.tree_sitter_helpers import ANNOTATION_NODES, node_text

PRIMITIVE_NODES = ("integral_type", "floating_point_type", "boolean_type", "void_type")


@dataclass
class TypeResolver:
    """
    Resolution context of one compilation unit.

    `known_types` holds the qualified names of every type declared by the
    sources of the current round, member types included as `Outer.Inner`;
    it is shared between units. `enclosing` names the types whose members
    are in scope, innermost first.
    """
    package: str = ""
    single_imports: dict[str, str] = field(default_factory=dict)  # simple name -> qualified name
    on_demand_imports: list[str] = field(default_factory=list)  # packages imported with `.*`
    known_types: set[str] = field(default_factory=set)
    enclosing: tuple[str, ...] = ()

    def qualify(self, name: str) -> str:
        return f"{self.package}.{name}" if self.package else name

    def _lookup(self, name: str, type_vars: Iterable[str]) -> Optional[str]:
        if name in type_vars:
            return name
        for outer in self.enclosing:
            if f"{outer}.{name}" in self.known_types:
                return f"{outer}.{name}"
        if name in self.single_imports:
            return self.single_imports[name]
        if self.qualify(name) in self.known_types:
            return self.qualify(name)
        if name in JAVA_LANG:
            return f"java.lang.{name}"
        for pkg in self.on_demand_imports:
            if f"{pkg}.{name}" in self.known_types or name in WELL_KNOWN_PACKAGES.get(pkg, ()):
                return f"{pkg}.{name}"
        return None

    def resolve(self, name: str, type_vars: Iterable[str] = ()) -> str:
        """Resolves a simple class name; returns it unchanged when nothing matches."""
        resolved = self._lookup(name, type_vars)
        if resolved is not None:
            return resolved
        if not self.on_demand_imports:
            return self.qualify(name)
        return name

    def _is_resolvable(self, name: str, type_vars: Iterable[str]) -> bool:
        return self._lookup(name, type_vars) is not None

    def render(self, source_bytes: bytes, node: Node, type_vars: Iterable[str] = ()) -> str:
        """Canonical text of a type node."""
        kind = node.type

        if kind in PRIMITIVE_NODES:
            return node_text(source_bytes, node)

        if kind == "type_identifier":
            return self.resolve(node_text(source_bytes, node), type_vars)

        if kind == "scoped_type_identifier":
            return self._render_scoped(source_bytes, node, type_vars)

        if kind == "generic_type":
            base, args = None, []
            for child in node.named_children:
                if child.type == "type_arguments":
                    args = [
                        self.render(source_bytes, a, type_vars)
                        for a in child.named_children
                        if a.type not in ANNOTATION_NODES
                    ]
                elif base is None:
                    base = self.render(source_bytes, child, type_vars)
            return f"{base}<{','.join(args)}>"

        if kind == "array_type":
            element = self.render(source_bytes, node.child_by_field_name("element"), type_vars)
            return element + "[]" * count_dimensions(node.child_by_field_name("dimensions"))

        if kind == "wildcard":
            bound_kind, bound = None, None
            for child in node.children:
                if child.type in ("extends", "super"):
                    bound_kind = child.type
                elif child.is_named and child.type not in ANNOTATION_NODES:
                    bound = self.render(source_bytes, child, type_vars)
            return f"? {bound_kind} {bound}" if bound_kind and bound else "?"

        if kind == "annotated_type":
            return self.render(source_bytes, node.named_children[-1], type_vars)

        # Anything else (e.g. an ERROR node): keep the source text, minus whitespace.
        return "".join(node_text(source_bytes, node).split())

    def _render_scoped(self, source_bytes: bytes, node: Node, type_vars: Iterable[str]) -> str:
        """
        `Map.Entry` resolves its leftmost segment (-> java.util.Map.Entry);
        `java.util.List` starts with a package and is kept as written.
        """
        parts = [c for c in node.named_children if c.type not in ANNOTATION_NODES]
        head, last = parts[0], parts[-1]
        tail = node_text(source_bytes, last)

        if head.type == "type_identifier":
            first = node_text(source_bytes, head)
            if self._is_resolvable(first, type_vars) or not first[:1].islower():
                return f"{self.resolve(first, type_vars)}.{tail}"
            return f"{first}.{tail}"
        return f"{self.render(source_bytes, head, type_vars)}.{tail}"


def count_dimensions(dims: Node) -> int:
    """Number of `[]` pairs in a `dimensions` node (None -> 0)."""
    if dims is None:
        return 0
    return sum(1 for c in dims.children if c.type == "[")
