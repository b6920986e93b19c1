"""Command line, configuration, directory scanning and summary output."""

from __future__ import annotations

import json
from pathlib import Path

from rmi_stubgen.config import StubGenConfig
from rmi_stubgen.inputs.directory_scanning import index_directory, index_path
from rmi_stubgen.main import main
from rmi_stubgen.models.stub_models import RemoteClass
from rmi_stubgen.outputs.output import print_summary, signature, to_json


SERVICE = """
package com.acme.api;

import jakarta.ejb.Remote;

@Remote
public interface Greeter {
    String greet(String name) throws GreetingException;
}
"""

PLAIN = """
package com.acme.api;

public class Helper {
    public void help() {}
}
"""


def write_sources(root: Path) -> Path:
    pkg = root / "src" / "com" / "acme" / "api"
    pkg.mkdir(parents=True)
    (pkg / "Greeter.java").write_text(SERVICE, encoding="utf-8")
    (pkg / "Helper.java").write_text(PLAIN, encoding="utf-8")
    (pkg / "notes.txt").write_text("not java", encoding="utf-8")
    return root / "src"


class TestConfig:

    def test_defaults(self):
        config = StubGenConfig.from_env({})
        assert config.output_dir == Path("rmi")
        assert config.extension == "js"
        assert config.encoding == "utf-8"
        assert config.log_level == "INFO"

    def test_from_env(self):
        config = StubGenConfig.from_env({
            "RMI_STUBGEN_OUTPUT_DIR": "build/stubs",
            "RMI_STUBGEN_EXTENSION": ".mjs",
            "RMI_STUBGEN_ENCODING": "latin-1",
            "RMI_STUBGEN_LOG_LEVEL": "debug",
        })
        assert config.output_dir == Path("build/stubs")
        assert config.extension == "mjs"
        assert config.encoding == "latin-1"
        assert config.log_level == "DEBUG"

    def test_unknown_log_level_falls_back_to_info(self, caplog):
        config = StubGenConfig.from_env({"RMI_STUBGEN_LOG_LEVEL": "verbose"})
        assert config.log_level == "INFO"
        assert "Unknown log level 'verbose'" in caplog.text

    def test_cli_runs_with_unknown_log_level(self, tmp_path, monkeypatch):
        src = write_sources(tmp_path)
        monkeypatch.setenv("RMI_STUBGEN_LOG_LEVEL", "verbose")
        assert main([str(src), "-o", str(tmp_path / "out")]) == 0
        assert (tmp_path / "out" / "com" / "acme" / "api" / "Greeter.js").is_file()


class TestDirectoryScanning:

    def test_only_java_files(self, tmp_path, indexer):
        src = write_sources(tmp_path)
        assert index_directory(indexer, str(src)) == 2
        assert sorted(e.simple_name for e in indexer.root_elements()) == ["Greeter", "Helper"]

    def test_single_file(self, tmp_path, indexer):
        src = write_sources(tmp_path)
        assert index_path(indexer, str(src / "com" / "acme" / "api" / "Greeter.java")) == 1

    def test_missing_file_is_a_warning(self, tmp_path, indexer, caplog):
        assert index_path(indexer, str(tmp_path / "Missing.java")) == 0
        assert "Failed to read" in caplog.text


class TestCli:

    def test_generates_into_output_dir(self, tmp_path):
        src = write_sources(tmp_path)
        out = tmp_path / "rmi"
        assert main([str(src), "-o", str(out)]) == 0
        generated = sorted(p.relative_to(out).as_posix() for p in out.rglob("*.js"))
        assert generated == ["com/acme/api/Greeter.js"]
        text = (out / "com" / "acme" / "api" / "Greeter.js").read_text(encoding="utf-8")
        assert " * @throws com.acme.api.GreetingException" in text

    def test_env_output_dir(self, tmp_path, monkeypatch):
        src = write_sources(tmp_path)
        monkeypatch.setenv("RMI_STUBGEN_OUTPUT_DIR", str(tmp_path / "from-env"))
        monkeypatch.setenv("RMI_STUBGEN_EXTENSION", "es.js")
        assert main([str(src)]) == 0
        assert (tmp_path / "from-env" / "com" / "acme" / "api" / "Greeter.es.js").is_file()

    def test_failure_exit_status(self, tmp_path):
        src = write_sources(tmp_path)
        blocker = tmp_path / "blocked"
        blocker.write_text("a file where a directory is needed", encoding="utf-8")
        assert main([str(src), "-o", str(blocker)]) == 1

    def test_json(self, tmp_path, capsys):
        src = write_sources(tmp_path)
        assert main([str(src), "--json"]) == 0
        data = json.loads(capsys.readouterr().out)
        [cls] = data["classes"]
        assert cls["qualifiedName"] == "com.acme.api.Greeter"
        assert cls["methods"][0]["parameters"] == [{"type": "java.lang.String", "name": "name"}]

    def test_print_does_not_write(self, tmp_path, capsys, monkeypatch):
        src = write_sources(tmp_path)
        monkeypatch.chdir(tmp_path)
        assert main([str(src), "--print"]) == 0
        assert "com.acme.api.Greeter = {" in capsys.readouterr().out
        assert not (tmp_path / "rmi").exists()

    def test_sample(self, capsys):
        assert main([]) == 0
        out = capsys.readouterr().out
        assert "[com.acme.demo.UserService]" in out
        assert "com.acme.demo.User addUser(java.lang.String name, int age) throws java.io.IOException" in out
        assert "java.util.List<com.acme.demo.User> findAll()" in out
        assert "evictCache" not in out


class TestOutput:

    def classes(self):
        rc = RemoteClass("com.acme.Calc")
        m = rc.create_method("add")
        m.return_type = "int"
        m.add_parameter("int", "a")
        m.add_parameter("int", "b")
        m.add_exception_type("java.lang.ArithmeticException")
        m.add_exception_type("java.lang.ArithmeticException")
        rc.add_method(m)
        return [rc]

    def test_signature(self):
        [rc] = self.classes()
        assert signature(rc.methods[0]) == "int add(int a, int b) throws java.lang.ArithmeticException"

    def test_summary(self, capsys):
        print_summary(self.classes())
        out = capsys.readouterr().out
        assert " - com.acme" in out
        assert "[com.acme.Calc]" in out

    def test_to_json(self):
        data = json.loads(to_json(self.classes()))
        assert data == {
            "classes": [{
                "qualifiedName": "com.acme.Calc",
                "packageName": "com.acme",
                "className": "Calc",
                "methods": [{
                    "name": "add",
                    "returnType": "int",
                    "parameters": [{"type": "int", "name": "a"}, {"type": "int", "name": "b"}],
                    "exceptions": ["java.lang.ArithmeticException"],
                }],
            }]
        }
