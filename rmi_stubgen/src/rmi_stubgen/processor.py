import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, Optional

from rmi_stubgen.collector import SignatureCollector
from rmi_stubgen.diagnostics import Diagnostics
from rmi_stubgen.models.ast_models import Element
from rmi_stubgen.models.stub_models import RemoteClass
from rmi_stubgen.outputs.filer import Filer
from rmi_stubgen.outputs.script import ScriptSerializer

logger = logging.getLogger(__name__)


@dataclass
class ProcessingResult:
    classes: list[RemoteClass] = field(default_factory=list)
    generated: list[Path] = field(default_factory=list)
    diagnostics: Diagnostics = field(default_factory=Diagnostics)


class RemoteScriptProcessor:
    """
    Generates one HTTP-RMI stub script per class exposing remote methods.

    Each script is written to `<package dirs>/<ClassName>.<extension>` via the
    filer. An I/O failure on one class is reported and the pass moves on to
    the next class.
    """

    def __init__(self, filer: Filer, serializer: Optional[ScriptSerializer] = None,
                 collector: Optional[SignatureCollector] = None, extension: str = "js"):
        self.filer = filer
        self.serializer = serializer or ScriptSerializer()
        self.collector = collector or SignatureCollector()
        self.extension = extension

    def process(self, root_elements: Iterable[Element]) -> ProcessingResult:
        result = ProcessingResult()
        for element, remote_class in self.collector.collect(root_elements):
            result.classes.append(remote_class)
            path = self._write(element, remote_class, result.diagnostics)
            if path is not None:
                result.generated.append(path)
        logger.info("Generated %d RMI script(s), %d failure(s)", len(result.generated), len(result.diagnostics))
        return result

    def _write(self, element: Element, remote_class: RemoteClass, diagnostics: Diagnostics) -> Optional[Path]:
        file_name = f"{remote_class.class_name}.{self.extension}"
        try:
            file = self.filer.create_resource(remote_class.package_name, file_name, element)
            with file.open_writer() as writer:
                self.serializer.serialize(remote_class, writer)
        except OSError as e:
            diagnostics.report(remote_class.qualified_name, e)
            return None
        logger.info("Generated %s", file.path)
        return file.path
