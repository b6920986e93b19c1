# --- Resource creation for generated scripts --------------------------------
import logging
from pathlib import Path
from typing import Optional, TextIO

from rmi_stubgen.models.ast_models import Element

logger = logging.getLogger(__name__)


class FilerError(OSError):
    """Raised when a resource is created twice in the same run."""


class FileObject:
    """A resource handed out by the Filer; opened for writing at most once per run."""

    def __init__(self, path: Path, encoding: str = "utf-8"):
        self.path = path
        self.encoding = encoding

    def open_writer(self) -> TextIO:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        # Characters the encoding cannot represent are written as "?", like a Java OutputStreamWriter.
        return open(self.path, "w", encoding=self.encoding, errors="replace")


class Filer:
    """
    Creates output resources under a root directory, laid out by package,
    and remembers which source files each one was generated from.
    """

    def __init__(self, output_dir, encoding: str = "utf-8"):
        self.output_dir = Path(output_dir)
        self.encoding = encoding
        self.origins: dict[Path, tuple[Optional[str], ...]] = {}

    def resource_path(self, package: str, relative_name: str) -> Path:
        pkg_dir = self.output_dir.joinpath(*package.split(".")) if package else self.output_dir
        return pkg_dir / relative_name

    def create_resource(self, package: str, relative_name: str, *originating: Element) -> FileObject:
        path = self.resource_path(package, relative_name)
        if path in self.origins:
            raise FilerError(f"Attempt to reopen a file for path {path}")
        self.origins[path] = tuple(e.source_path for e in originating)
        logger.debug("Created resource %s from %s", path, self.origins[path])
        return FileObject(path, self.encoding)
