import logging
from typing import Iterable, Iterator, Optional

from rmi_stubgen.models.ast_models import Element, ElementKind, ExecutableElement, Marker, TypeElement
from rmi_stubgen.models.stub_models import RemoteClass

logger = logging.getLogger(__name__)

REMOTE_TYPE_KINDS = (ElementKind.INTERFACE, ElementKind.CLASS)


def is_not_public(method: Element) -> bool:
    """Private and protected methods are never remote; public and package-private are."""
    return "private" in method.modifiers or "protected" in method.modifiers


def is_remote(element: Element) -> bool:
    """Annotated @Remote or @Service, whatever the annotation's package."""
    return Marker.REMOTE in element.markers


def is_local(element: Element) -> bool:
    return Marker.LOCAL in element.markers


class SignatureCollector:
    """
    Walks the root elements of a round and extracts the signatures of the
    remote methods of each interface or class.

    A method is remote when it is neither private, protected nor @Local, and
    either it or its owning type carries a remote marker.
    """

    def collect(self, root_elements: Iterable[Element]) -> Iterator[tuple[TypeElement, RemoteClass]]:
        """
        Yields (originating element, model) for every type with at least one
        remote method.
        """
        for element in root_elements:
            if element.kind not in REMOTE_TYPE_KINDS:
                continue
            remote_class = self.collect_class(element)
            if remote_class is not None:
                yield element, remote_class

    def collect_class(self, type_element: TypeElement) -> Optional[RemoteClass]:
        remote_type = is_remote(type_element)
        remote_class = RemoteClass(type_element.qualified_name)

        for member in type_element.enclosed:
            if member.kind is not ElementKind.METHOD:
                continue
            if is_not_public(member):
                continue
            if is_local(member):
                continue
            if not remote_type and not is_remote(member):
                continue
            if member.simple_name in remote_class.method_names():
                # Overloads share one name in the stub; the script side cannot tell them apart.
                logger.warning(
                    "Overloaded remote method %s#%s; stub keeps every overload under the same name",
                    remote_class.qualified_name, member.simple_name,
                )
            remote_class.add_method(self._extract(remote_class, member))

        if not remote_class.has_methods():
            logger.debug("No remote methods on %s", type_element.qualified_name)
            return None
        return remote_class

    def _extract(self, remote_class: RemoteClass, method: ExecutableElement):
        remote_method = remote_class.create_method(method.simple_name)
        remote_method.return_type = method.return_type
        for parameter in method.parameters:
            remote_method.add_parameter(parameter.type, parameter.name)
        for thrown in method.thrown_types:
            remote_method.add_exception_type(thrown)
        return remote_method
