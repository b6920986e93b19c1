# --- Declaration elements built from the Java AST ---------------------------
from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable, Optional


class ElementKind(Enum):
    CLASS = "class"
    INTERFACE = "interface"
    ENUM = "enum"
    RECORD = "record"
    ANNOTATION_TYPE = "annotation_type"
    METHOD = "method"
    CONSTRUCTOR = "constructor"
    FIELD = "field"
    OTHER = "other"


class Marker(Enum):
    """Capabilities an annotation can grant to a type or method."""
    REMOTE = "remote"
    LOCAL = "local"


# Annotations are matched by simple name so that jakarta.ejb.Remote,
# javax.ejb.Remote and any other namespace all count.
MARKER_TABLE: dict[str, Marker] = {
    "Remote": Marker.REMOTE,
    "Service": Marker.REMOTE,
    "Local": Marker.LOCAL,
}


def simple_name(name: str) -> str:
    """`jakarta.ejb.Remote` -> `Remote`."""
    return name.rsplit(".", 1)[-1]


def resolve_markers(annotations: Iterable[str]) -> frozenset[Marker]:
    return frozenset(
        MARKER_TABLE[simple_name(a)] for a in annotations if simple_name(a) in MARKER_TABLE
    )


@dataclass
class Element:
    """A declaration as seen by the processor: kind, name, modifiers and annotations."""
    simple_name: str
    kind: ElementKind = ElementKind.OTHER
    modifiers: frozenset[str] = frozenset()
    annotations: tuple[str, ...] = ()  # annotation names as written, e.g. ("Remote", "javax.ejb.Local")
    source_path: Optional[str] = None
    line: int = 0
    markers: frozenset[Marker] = field(init=False)

    def __post_init__(self):
        self.modifiers = frozenset(self.modifiers)
        self.annotations = tuple(self.annotations)
        self.markers = resolve_markers(self.annotations)


@dataclass
class Parameter:
    type: str  # canonical type, e.g. "java.lang.String"
    name: str


@dataclass
class ExecutableElement(Element):
    """A method declaration with its signature already rendered to canonical type strings."""
    kind: ElementKind = ElementKind.METHOD
    return_type: str = "void"
    parameters: list[Parameter] = field(default_factory=list)
    thrown_types: list[str] = field(default_factory=list)


@dataclass
class TypeElement(Element):
    """A class or interface (or any other type) together with its members in declaration order."""
    kind: ElementKind = ElementKind.CLASS
    package: str = ""
    enclosed: list[Element] = field(default_factory=list)

    @property
    def qualified_name(self) -> str:
        return f"{self.package}.{self.simple_name}" if self.package else self.simple_name
