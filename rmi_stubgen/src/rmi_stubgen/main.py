#!/usr/bin/env python3
"""
HTTP-RMI stub script generator
------------------------------
Parses Java sources and, for every interface or class exposing remote
methods, writes a JavaScript stub that calls those methods through
js.net.RMI.

A type is remote when annotated @Remote or @Service (any package, e.g.
jakarta.ejb.Remote or javax.ejb.Remote). On a remote type every public,
non-@Local method is exported; on other types only methods annotated
@Remote/@Service are.

USAGE EXAMPLES
--------------
# 1) Run against an in-code sample (no files needed):
rmi-stubgen

# 2) Generate stubs for a source tree into ./rmi:
rmi-stubgen src/main/java

# 3) Preview instead of writing:
rmi-stubgen src/main/java --print
rmi-stubgen src/main/java --json
"""

import argparse
import logging
import sys
from pathlib import Path

from rmi_stubgen.collector import SignatureCollector
from rmi_stubgen.config import StubGenConfig
from rmi_stubgen.indexer import JavaIndexer
from rmi_stubgen.inputs.directory_scanning import index_path
from rmi_stubgen.outputs.filer import Filer
from rmi_stubgen.outputs.output import print_summary, to_json
from rmi_stubgen.outputs.script import ScriptSerializer
from rmi_stubgen.processor import RemoteScriptProcessor

logger = logging.getLogger("rmi_stubgen")

# --- Demo sample -------------------------------------------------------------

SAMPLE_JAVA = r"""
package com.acme.demo;

import jakarta.ejb.Local;
import jakarta.ejb.Remote;
import java.io.IOException;
import java.util.List;

@Remote
public interface UserService {
    User addUser(String name, int age) throws IOException;

    List<User> findAll();

    @Local
    void evictCache();
}

class User {
    private final String name;
    public User(String name) { this.name = name; }
}
"""


def build_parser(config: StubGenConfig) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="rmi-stubgen",
        description="Generate HTTP-RMI JavaScript stubs from remote Java interfaces and classes.",
    )
    parser.add_argument("sources", nargs="*", help=".java files or directories to scan (default: built-in sample)")
    parser.add_argument("-o", "--output-dir", type=Path, default=config.output_dir,
                        help=f"root directory for generated scripts (default: {config.output_dir})")
    parser.add_argument("--extension", default=config.extension,
                        help=f"generated file extension (default: {config.extension})")
    parser.add_argument("--encoding", default=config.encoding,
                        help=f"generated file encoding (default: {config.encoding})")
    mode = parser.add_mutually_exclusive_group()
    mode.add_argument("--print", dest="print_only", action="store_true",
                      help="print the generated scripts instead of writing them")
    mode.add_argument("--json", action="store_true", help="print the collected stub models as JSON")
    parser.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    return parser


def main(argv=None) -> int:
    config = StubGenConfig.from_env()
    args = build_parser(config).parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else config.log_level,
        format="%(asctime)s - [%(name)s] - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )

    indexer = JavaIndexer()
    if args.sources:
        for source in args.sources:
            index_path(indexer, source)
    else:
        indexer.index_source(SAMPLE_JAVA, "<sample>")
    elements = indexer.root_elements()

    if args.json or args.print_only or not args.sources:
        classes = [rc for _, rc in SignatureCollector().collect(elements)]
        if args.json:
            print(to_json(classes))
            return 0
        if not args.sources:
            print_summary(classes)
        serializer = ScriptSerializer()
        for rc in classes:
            print(f"\n// --- {rc.qualified_name} ---")
            serializer.serialize(rc, sys.stdout)
        return 0

    processor = RemoteScriptProcessor(Filer(args.output_dir, args.encoding), extension=args.extension.lstrip("."))
    result = processor.process(elements)
    return 1 if result.diagnostics.has_errors() else 0


if __name__ == "__main__":
    sys.exit(main())
