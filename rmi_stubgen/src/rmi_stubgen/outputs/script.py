"""Render a RemoteClass into an HTTP-RMI JavaScript stub.

The stub is an object literal named after the Java class; each remote method
becomes a function that forwards its arguments through js.net.RMI.
"""

from __future__ import annotations

from pathlib import Path
from typing import TextIO

import jinja2

from rmi_stubgen.models.stub_models import RemoteClass

TEMPLATE_DIR = Path(__file__).parent / "templates"
TEMPLATE_NAME = "remote_class.js.j2"


class ScriptSerializer:
    """Renders stub scripts from the remote_class.js.j2 template."""

    def __init__(self, template_name: str = TEMPLATE_NAME) -> None:
        env = jinja2.Environment(
            loader=jinja2.FileSystemLoader(str(TEMPLATE_DIR)),
            keep_trailing_newline=True,
            trim_blocks=True,
            lstrip_blocks=True,
            undefined=jinja2.StrictUndefined,
        )
        self.template = env.get_template(template_name)

    def render(self, remote_class: RemoteClass) -> str:
        return self.template.render(cls=remote_class)

    def serialize(self, remote_class: RemoteClass, writer: TextIO) -> None:
        """Write the rendered stub to an open writer; the caller owns closing it."""
        writer.write(self.render(remote_class))
