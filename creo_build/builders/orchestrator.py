"""
Build orchestrator that sequences the build stages
"""

from typing import Dict, Optional, Type

from ..exceptions import BuildFilesystemError
from ..report import BuildInfoGenerator, SummaryPrinter
from ..types import BuildConfig, EXPANDED_OUTPUT
from ..utils import Logger, ensure_dir, remove_dir
from .sass_compiler import SassCompiler
from .variant_builder import CompressedBuilder, ExpandedBuilder, LeanBuilder, VariantBuilder


class BuildOrchestrator:
    """Runs the build stages one after another, stopping at the first failure"""

    # Variants in build order
    BUILDER_MAP: Dict[str, Type[VariantBuilder]] = {
        "expanded": ExpandedBuilder,
        "compressed": CompressedBuilder,
        "lean": LeanBuilder,
    }

    def __init__(self,
                 config: BuildConfig,
                 logger: Logger,
                 compiler: Optional[SassCompiler] = None,
                 report: Optional[BuildInfoGenerator] = None,
                 summary: Optional[SummaryPrinter] = None):
        """
        Initialize build orchestrator

        Args:
            config: Build configuration
            logger: Logger instance
            compiler: Sass wrapper shared by all builders
            report: BUILD_INFO.txt generator
            summary: Final console summary
        """
        self.config = config
        self.logger = logger
        self.compiler = compiler or SassCompiler(config, logger)
        self.report = report or BuildInfoGenerator(config, logger)
        self.summary = summary or SummaryPrinter(config, logger)

    def get_builder(self, name: str) -> VariantBuilder:
        """
        Get the builder for a variant

        Args:
            name: Variant name

        Returns:
            Builder instance
        """
        builder_class = self.BUILDER_MAP.get(name)
        if not builder_class:
            raise ValueError(f"Unknown variant: {name}")
        return builder_class(self.config, self.compiler, self.logger)

    def ensure_dist(self):
        try:
            ensure_dir(self.config.dist_dir)
        except OSError as e:
            self.logger.error(f"Failed to create dist directory: {e}")
            raise BuildFilesystemError(str(e)) from e

    def clean(self):
        """Remove and recreate the dist directory"""
        self.logger.info("Cleaning dist directory...")
        try:
            remove_dir(self.config.dist_dir)
            ensure_dir(self.config.dist_dir)
        except OSError as e:
            self.logger.error(f"Failed to clean dist directory: {e}")
            raise BuildFilesystemError(str(e)) from e
        self.logger.success("Cleaned dist directory")

    def build(self, name: str):
        """
        Build a single variant without cleaning

        Args:
            name: Variant name
        """
        self.ensure_dist()
        self.get_builder(name).build()

    def build_expanded(self):
        self.build("expanded")

    def build_compressed(self):
        self.build("compressed")

    def build_lean(self):
        self.build("lean")

    def build_all(self):
        """Clean, build every variant, write the report and print the summary"""
        self.ensure_dist()
        self.clean()
        for name in self.BUILDER_MAP:
            self.get_builder(name).build()
        self.report.generate_build_info()
        self.summary.show()

    def watch(self):
        """Recompile the expanded build whenever sources change"""
        self.ensure_dist()
        self.logger.info("Starting watch mode...")
        self.logger.warning("Press Ctrl+C to stop watching")
        self.compiler.watch(self.config.main_file, EXPANDED_OUTPUT)


__all__ = ["BuildOrchestrator"]
