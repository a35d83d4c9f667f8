import json

import pytest
from pydantic import ValidationError

from creo_build.config import ConfigLoader
from creo_build.exceptions import ConfigError
from creo_build.types import DEFAULT_LEAN_MODULES


def test_load_uses_packaged_defaults(project):
    config = ConfigLoader(project).load()

    assert config.version == "1.0.0"
    assert config.src_dir == project.resolve() / "scss"
    assert config.dist_dir == project.resolve() / "dist"
    assert config.main_file == "creo.scss"
    assert config.lean_file == "creo.lean.scss"
    assert config.source_map is True
    assert config.sass_command == ["sass"]
    assert config.lean_modules == DEFAULT_LEAN_MODULES


def test_project_override_file_is_merged(project):
    (project / "creo.build.yaml").write_text("dist_dir: build/css\nsource_map: false\n")

    config = ConfigLoader(project).load()

    assert config.dist_dir == project.resolve() / "build" / "css"
    assert config.source_map is False
    assert config.src_dir == project.resolve() / "scss"


def test_explicit_config_file_must_exist(project):
    with pytest.raises(ConfigError):
        ConfigLoader(project, project / "missing.yaml")


def test_invalid_yaml_mapping(project):
    (project / "creo.build.yaml").write_text("- just\n- a list\n")
    with pytest.raises(ConfigError):
        ConfigLoader(project)


def test_missing_manifest(tmp_path):
    with pytest.raises(ConfigError, match="manifest not found"):
        ConfigLoader(tmp_path).load()


def test_manifest_without_version(tmp_path):
    (tmp_path / "package.json").write_text(json.dumps({"name": "creo"}))
    with pytest.raises(ConfigError, match="No version"):
        ConfigLoader(tmp_path).load()


def test_overrides_take_precedence(project):
    config = ConfigLoader(project).load(source_map=False, version="2.0.0-beta")
    assert config.source_map is False
    assert config.version == "2.0.0-beta"


def test_none_overrides_are_ignored(project):
    config = ConfigLoader(project).load(source_map=None)
    assert config.source_map is True


def test_build_config_is_immutable(config):
    with pytest.raises(ValidationError):
        config.version = "9.9.9"
