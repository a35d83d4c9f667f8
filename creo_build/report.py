"""
Build information report and console summary
"""

from concurrent.futures import ThreadPoolExecutor
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional, Tuple

from .platform import PlatformDetector
from .types import BUILD_INFO_FILE, CSS_OUTPUTS, BuildConfig
from .utils import Logger, get_file_size

BUILD_INFO_TEMPLATE = """\
{framework_name} Framework Build Information
====================================

Build Date: {build_date}
Version: {version}
Python Version: {python_version}
Platform: {platform}

Files Generated:
================

creo.css          - Full framework (expanded)
creo.min.css      - Full framework (compressed)
creo.lean.css     - Lean build (expanded)
creo.lean.min.css - Lean build (compressed)

File Sizes:
===========

{size_table}

Framework Modules Included:
===========================

Full Build:
- Core: Reset, Tokens, Typography
- Layout: Containers, Grid, Sections
- Utilities: Spacing, Text, Responsive
- Themes: Dark Mode
- Components: Available as separate imports

Lean Build:
- Core: Reset, Tokens, Typography
- Layout: Containers, Sections
- Themes: Dark Mode
- Total reduction: ~60% smaller than full build

Usage:
======

HTML:
<link rel="stylesheet" href="creo.min.css">

Sass:
@use '@creo-framework/creo';

NPM:
npm install @creo-framework/creo

For more information: https://creo-framework.dev
"""

BOX_WIDTH = 64


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


def format_size_row(name: str, size: str) -> str:
    return f"{name:<20} - {size}"


def boxed(title: str) -> List[str]:
    """Three-line box with the title centered"""
    return [
        "╔" + "═" * BOX_WIDTH + "╗",
        "║" + title.center(BOX_WIDTH) + "║",
        "╚" + "═" * BOX_WIDTH + "╝",
    ]


class BuildInfoGenerator:
    """Writes BUILD_INFO.txt into the dist directory"""

    def __init__(self,
                 config: BuildConfig,
                 logger: Logger,
                 clock: Callable[[], datetime] = _utc_now,
                 platform_info: Optional[Dict[str, Any]] = None):
        """
        Initialize the report generator

        Args:
            config: Build configuration
            logger: Logger instance
            clock: Returns the build timestamp
            platform_info: Overrides PlatformDetector output
        """
        self.config = config
        self.logger = logger
        self.clock = clock
        self.platform_info = platform_info or PlatformDetector().detect()

    @property
    def output_path(self) -> Path:
        return self.config.dist_dir / BUILD_INFO_FILE

    def render(self) -> str:
        size_table = "\n".join(
            format_size_row(name, get_file_size(self.config.dist_dir / name))
            for name in CSS_OUTPUTS
        )
        return BUILD_INFO_TEMPLATE.format(
            framework_name=self.config.framework_name,
            build_date=self.clock().isoformat(timespec="milliseconds").replace("+00:00", "Z"),
            version=self.config.version,
            python_version=self.platform_info.get("python_version", "unknown"),
            platform=self.platform_info.get("platform", "unknown"),
            size_table=size_table,
        )

    def generate_build_info(self) -> Path:
        """
        Render the report and write it to disk

        Returns:
            Path of the written report
        """
        self.logger.info("Generating build information...")
        self.output_path.write_text(self.render(), encoding="utf-8")
        self.logger.success("Generated build information")
        return self.output_path


class SummaryPrinter:
    """Prints the final listing of the dist directory"""

    def __init__(self, config: BuildConfig, logger: Logger):
        self.config = config
        self.logger = logger

    def collect(self) -> List[Tuple[str, str]]:
        """
        Size every entry in the dist directory

        Returns:
            (name, size) pairs sorted by name
        """
        files = list(self.config.dist_dir.iterdir())
        with ThreadPoolExecutor(max_workers=max(1, min(8, len(files)))) as executor:
            sizes = list(executor.map(get_file_size, files))
        return sorted(zip((p.name for p in files), sizes))

    def show(self):
        self.logger.raw("")
        for line in boxed("Build Complete!"):
            self.logger.raw(line)
        self.logger.raw("")

        self.logger.raw("📦 Generated files:")
        try:
            for name, size in self.collect():
                self.logger.raw(f"   {format_size_row(name, size)}")
        except OSError:
            self.logger.error("Failed to read dist directory")

        dist_name = self.config.dist_dir.name
        self.logger.raw("")
        self.logger.raw("💡 Quick start:")
        self.logger.raw(f'   <link rel="stylesheet" href="{dist_name}/creo.min.css">')
        self.logger.raw("")
        self.logger.raw(f"🔍 Build details in: {dist_name}/{BUILD_INFO_FILE}")
        self.logger.raw("")


__all__ = ["BuildInfoGenerator", "SummaryPrinter", "boxed", "format_size_row"]
