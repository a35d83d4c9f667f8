"""
Wrapper around the external sass compiler
"""

import shutil
import subprocess
from pathlib import Path
from typing import List, Optional

from ..exceptions import CompileError, DependencyMissingError
from ..types import BuildConfig, CompileOptions, CompileResult, CompileStyle
from ..utils import Logger, get_file_size


class SassCompiler:
    """Runs sass synchronously and reports the outcome of each invocation"""

    def __init__(self, config: BuildConfig, logger: Logger, dry_run: bool = False):
        """
        Initialize the compiler wrapper

        Args:
            config: Build configuration
            logger: Logger instance
            dry_run: If True, log commands instead of running them
        """
        self.config = config
        self.logger = logger
        self.dry_run = dry_run
        self.command: List[str] = list(config.sass_command)

    def run_command(self,
                    cmd: List[str],
                    check: bool = True,
                    quiet: bool = False) -> subprocess.CompletedProcess:
        """
        Run a command with logging

        Args:
            cmd: Command and arguments
            check: Raise exception on non-zero exit
            quiet: Discard the command's output instead of inheriting the console

        Returns:
            CompletedProcess instance
        """
        cmd_str = " ".join(str(c) for c in cmd)
        self.logger.debug(f"Running: {cmd_str}")

        if self.dry_run:
            self.logger.info(f"[DRY RUN] Would run: {cmd_str}")
            return subprocess.CompletedProcess(cmd, 0, "", "")

        stream = subprocess.DEVNULL if quiet else None
        return subprocess.run(
            [str(c) for c in cmd],
            cwd=self.config.root_dir,
            check=check,
            stdout=stream,
            stderr=stream,
            text=True
        )

    def build_command(self, input_path: Path, output_path: Path, options: CompileOptions) -> List[str]:
        cmd = self.command + [str(input_path), str(output_path), f"--style={options.style.value}"]
        if options.source_map:
            cmd += ["--source-map", "--embed-sources"]
        else:
            cmd.append("--no-source-map")
        return cmd

    def compile(self,
                input_file: str,
                output_file: str,
                options: Optional[CompileOptions] = None) -> CompileResult:
        """
        Compile one entry file

        Args:
            input_file: Entry file relative to the source directory
            output_file: Output file relative to the dist directory
            options: Style and source map settings

        Returns:
            Success with the output size, or failure with the error text
        """
        if options is None:
            options = CompileOptions(source_map=self.config.source_map)

        input_path = self.config.src_dir / input_file
        output_path = self.config.dist_dir / output_file

        try:
            self.run_command(self.build_command(input_path, output_path, options))
        except subprocess.CalledProcessError as e:
            return CompileResult.failure(str(e))
        except OSError as e:
            return CompileResult.failure(f"Failed to run {self.command[0]}: {e}")

        return CompileResult.success(get_file_size(output_path))

    def is_available(self) -> bool:
        """Check whether `sass --version` runs"""
        try:
            self.run_command(self.command + ["--version"], quiet=True)
            return True
        except (subprocess.CalledProcessError, OSError):
            return False

    def install(self) -> bool:
        """
        Try once to install sass with the package manager

        Returns:
            True if the install command succeeded
        """
        self.logger.info("Installing sass...")
        try:
            self.run_command(list(self.config.install_command))
        except (subprocess.CalledProcessError, OSError) as e:
            self.logger.debug(f"Install failed: {e}")
            return False

        # npm installs into node_modules/.bin, which is usually not on PATH
        if not shutil.which(self.command[0]):
            local_sass = self.config.root_dir / "node_modules" / ".bin" / self.command[0]
            if local_sass.exists():
                self.logger.debug(f"Using locally installed {local_sass}")
                self.command = [str(local_sass)] + self.command[1:]
        return True

    def ensure_available(self):
        """Make sure sass can run, installing it once if needed"""
        if self.is_available():
            return

        self.logger.error("Sass compiler not found!")
        if not self.install():
            self.logger.error("Failed to install sass")
            raise DependencyMissingError("sass is not installed and could not be installed")

        if not self.is_available():
            self.logger.error("Sass still not runnable after install")
            raise DependencyMissingError("sass was installed but cannot be run")

        self.logger.success("Sass installed successfully")

    def watch(self, input_file: str, output_file: str):
        """
        Run sass in watch mode until interrupted

        Args:
            input_file: Entry file relative to the source directory
            output_file: Output file relative to the dist directory
        """
        input_path = self.config.src_dir / input_file
        output_path = self.config.dist_dir / output_file

        cmd = self.command + [
            "--watch",
            f"{input_path}:{output_path}",
            f"--style={CompileStyle.EXPANDED.value}",
        ]
        if self.config.source_map:
            cmd.append("--source-map")

        try:
            self.run_command(cmd)
        except KeyboardInterrupt:
            self.logger.info("Watch mode stopped")
        except (subprocess.CalledProcessError, OSError) as e:
            self.logger.error(f"Watch mode failed: {e}")
            raise CompileError(f"Watch mode failed: {e}") from e


__all__ = ["SassCompiler"]
