"""Contains models shared by the build stages"""

from enum import Enum
from pathlib import Path
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

EXPANDED_OUTPUT = "creo.css"
COMPRESSED_OUTPUT = "creo.min.css"
LEAN_OUTPUT = "creo.lean.css"
LEAN_COMPRESSED_OUTPUT = "creo.lean.min.css"
BUILD_INFO_FILE = "BUILD_INFO.txt"

CSS_OUTPUTS = (EXPANDED_OUTPUT, COMPRESSED_OUTPUT, LEAN_OUTPUT, LEAN_COMPRESSED_OUTPUT)

DEFAULT_LEAN_MODULES = [
    "core/tokens",
    "core/reset",
    "core/typography",
    "layout/containers",
    "layout/sections",
    "themes/dark",
]


class CompileStyle(str, Enum):
    """Output formatting mode passed to sass via --style"""
    EXPANDED = "expanded"
    COMPRESSED = "compressed"


class BuildConfig(BaseModel):
    """Holds the build settings. Built once at startup and never modified."""
    model_config = ConfigDict(frozen=True)

    root_dir: Path
    """Project root; relative directories are resolved against it"""
    src_dir: Path
    """Directory holding the Sass sources"""
    dist_dir: Path
    """Directory receiving the compiled CSS"""
    main_file: str = "creo.scss"
    """Entry file of the full build, relative to src_dir"""
    lean_file: str = "creo.lean.scss"
    """Entry file of the lean build, relative to src_dir"""
    version: str
    """Declared framework version, read from the package manifest"""
    framework_name: str = "Creo CSS"
    source_map: bool = True
    """Emit source maps alongside every compiled file"""
    sass_command: List[str] = Field(default_factory=lambda: ["sass"])
    install_command: List[str] = Field(
        default_factory=lambda: ["npm", "install", "sass", "--save-dev"])
    lean_modules: List[str] = Field(default_factory=lambda: list(DEFAULT_LEAN_MODULES))
    """Modules pulled into a synthesized lean entry file"""

    @property
    def lean_path(self) -> Path:
        return self.src_dir / self.lean_file

    @property
    def main_path(self) -> Path:
        return self.src_dir / self.main_file


class CompileOptions(BaseModel):
    """Options for a single sass invocation"""
    model_config = ConfigDict(frozen=True)

    style: CompileStyle = CompileStyle.EXPANDED
    source_map: bool = True


class CompileResult(BaseModel):
    """Outcome of a single sass invocation"""
    model_config = ConfigDict(frozen=True)

    ok: bool
    size_label: Optional[str] = None
    """Human readable size of the output, set on success"""
    message: Optional[str] = None
    """Raw error text, set on failure"""

    @classmethod
    def success(cls, size_label: str) -> "CompileResult":
        return cls(ok=True, size_label=size_label)

    @classmethod
    def failure(cls, message: str) -> "CompileResult":
        return cls(ok=False, message=message)
