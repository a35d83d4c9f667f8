"""
Generates the lean Sass entry file when a project does not provide one
"""

from ..types import BuildConfig
from ..utils import Logger, ensure_dir, output_exists

LEAN_TEMPLATE = """\
// =============================================================================
// {framework_name} Framework - Lean Build
// =============================================================================
// Minimal build for maximum performance

{imports}

// Framework metadata
:root {{
  --creo-version: "{version}-lean";
  --creo-framework: "{framework_name} Lean";
}}
"""

# Section comment emitted before the first module of each group
GROUP_HEADINGS = {
    "core": "// Core essentials only",
    "layout": "// Essential layout",
    "themes": "// Dark theme (lightweight)",
}


class LeanSourceSynthesizer:
    """Writes the lean entry file once; an existing file is never touched"""

    def __init__(self, config: BuildConfig, logger: Logger):
        self.config = config
        self.logger = logger

    def render(self) -> str:
        lines = []
        current_group = None
        for module in self.config.lean_modules:
            group = module.split("/", 1)[0]
            if group != current_group:
                if current_group is not None:
                    lines.append("")
                lines.append(GROUP_HEADINGS.get(group, f"// {group.capitalize()}"))
                current_group = group
            lines.append(f"@use '{module}';")

        return LEAN_TEMPLATE.format(
            framework_name=self.config.framework_name,
            imports="\n".join(lines),
            version=self.config.version,
        )

    def ensure_lean_source(self) -> bool:
        """
        Create the lean entry file if it is missing

        Returns:
            True if the file was written
        """
        lean_path = self.config.lean_path
        if output_exists(lean_path):
            self.logger.debug(f"Lean source already present: {lean_path}")
            return False

        self.logger.warning("Creating lean build file...")
        ensure_dir(lean_path.parent)
        lean_path.write_text(self.render(), encoding="utf-8")
        self.logger.success("Created lean build file")
        return True


__all__ = ["LeanSourceSynthesizer", "LEAN_TEMPLATE"]
