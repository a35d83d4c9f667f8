"""
Builders for the individual CSS variants
"""

from abc import ABC, abstractmethod
from typing import Tuple

from ..exceptions import CompileError
from ..types import (
    COMPRESSED_OUTPUT,
    CSS_OUTPUTS,
    EXPANDED_OUTPUT,
    LEAN_COMPRESSED_OUTPUT,
    LEAN_OUTPUT,
    BuildConfig,
    CompileOptions,
    CompileStyle,
)
from ..utils import Logger
from .lean_source import LeanSourceSynthesizer
from .sass_compiler import SassCompiler


class VariantBuilder(ABC):
    """Abstract base class for all variant builders"""

    name = "variant"

    def __init__(self, config: BuildConfig, compiler: SassCompiler, logger: Logger):
        """
        Initialize variant builder

        Args:
            config: Build configuration
            compiler: Sass compiler wrapper
            logger: Logger instance
        """
        self.config = config
        self.compiler = compiler
        self.logger = logger

    def options(self, style: CompileStyle) -> CompileOptions:
        return CompileOptions(style=style, source_map=self.config.source_map)

    @abstractmethod
    def build(self):
        """Build the variant, raising CompileError on failure"""

    def fail(self, error: str):
        self.logger.error(f"Failed to build {self.name} CSS: {error}")
        raise CompileError(error)


class SingleVariantBuilder(VariantBuilder):
    """Compiles the main entry file to one output in one style"""

    output_file = ""
    style = CompileStyle.EXPANDED

    def build(self):
        self.logger.info(f"Building {self.name} CSS...")
        result = self.compiler.compile(self.config.main_file, self.output_file, self.options(self.style))

        if not result.ok:
            self.fail(result.message or "unknown error")

        self.logger.success(f"Built {self.output_file} ({result.size_label})")


class ExpandedBuilder(SingleVariantBuilder):
    name = "expanded"
    output_file = EXPANDED_OUTPUT
    style = CompileStyle.EXPANDED


class CompressedBuilder(SingleVariantBuilder):
    name = "compressed"
    output_file = COMPRESSED_OUTPUT
    style = CompileStyle.COMPRESSED


class LeanBuilder(VariantBuilder):
    """Builds the expanded and compressed lean pair"""

    name = "lean"

    def __init__(self, config: BuildConfig, compiler: SassCompiler, logger: Logger):
        super().__init__(config, compiler, logger)
        self.synthesizer = LeanSourceSynthesizer(config, logger)

    def build(self):
        self.synthesizer.ensure_lean_source()

        self.logger.info("Building lean CSS...")

        # Both are attempted even if the first fails so all errors get reported
        expanded = self.compiler.compile(
            self.config.lean_file, LEAN_OUTPUT, self.options(CompileStyle.EXPANDED))
        compressed = self.compiler.compile(
            self.config.lean_file, LEAN_COMPRESSED_OUTPUT, self.options(CompileStyle.COMPRESSED))

        if expanded.ok and compressed.ok:
            self.logger.success(f"Built lean builds ({expanded.size_label} / {compressed.size_label})")
            return

        errors: Tuple[str, ...] = tuple(
            result.message for result in (expanded, compressed)
            if not result.ok and result.message
        )
        self.fail(", ".join(errors) or "unknown error")


__all__ = [
    "VariantBuilder",
    "ExpandedBuilder",
    "CompressedBuilder",
    "LeanBuilder",
    "CSS_OUTPUTS",
    "EXPANDED_OUTPUT",
    "COMPRESSED_OUTPUT",
    "LEAN_OUTPUT",
    "LEAN_COMPRESSED_OUTPUT",
]
