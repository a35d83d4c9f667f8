import json
import subprocess
import sys
from pathlib import Path

import pytest

ROOT_DIR = Path(__file__).resolve().parents[1]
if str(ROOT_DIR) not in sys.path:
    sys.path.insert(0, str(ROOT_DIR))

from creo_build.config import ConfigLoader
from creo_build.utils import Logger


class FakeSass:
    """Stands in for subprocess.run; writes the output file sass would produce."""

    def __init__(self, fail_on=(), missing=False):
        self.calls = []
        self.fail_on = set(fail_on)
        self.missing = missing

    def __call__(self, cmd, **kwargs):
        self.calls.append(list(cmd))
        if self.missing:
            raise FileNotFoundError(2, "No such file or directory", cmd[0])
        if "--version" in cmd:
            return subprocess.CompletedProcess(cmd, 0, "1.77.0", "")
        if "--watch" in cmd:
            return subprocess.CompletedProcess(cmd, 0, "", "")

        output = Path(cmd[2])
        if output.name in self.fail_on:
            raise subprocess.CalledProcessError(65, cmd)
        output.write_text("body{margin:0}" if "--style=compressed" in cmd else "body {\n  margin: 0;\n}\n")
        return subprocess.CompletedProcess(cmd, 0, "", "")

    def compiled_outputs(self):
        return [Path(c[2]).name for c in self.calls if "--version" not in c and "--watch" not in c]


@pytest.fixture
def project(tmp_path):
    (tmp_path / "scss").mkdir()
    (tmp_path / "scss" / "creo.scss").write_text("@use 'core/reset';\n")
    (tmp_path / "package.json").write_text(json.dumps({"name": "@creo-framework/creo", "version": "1.0.0"}))
    return tmp_path


@pytest.fixture
def config(project):
    return ConfigLoader(project).load()


@pytest.fixture
def logger():
    return Logger(verbose=True)


@pytest.fixture
def fake_sass(monkeypatch):
    fake = FakeSass()
    monkeypatch.setattr("creo_build.builders.sass_compiler.subprocess.run", fake)
    return fake


@pytest.fixture
def make_fake_sass(monkeypatch):
    def factory(**kwargs):
        fake = FakeSass(**kwargs)
        monkeypatch.setattr("creo_build.builders.sass_compiler.subprocess.run", fake)
        return fake
    return factory
