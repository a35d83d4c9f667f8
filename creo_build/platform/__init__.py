"""
Platform detection for build reports
"""

import platform
import sys
from typing import Any, Dict


class PlatformDetector:
    """Detects information about the interpreter and host platform"""

    def detect(self) -> Dict[str, Any]:
        """
        Detect current platform and runtime

        Returns:
            Dictionary with platform information
        """
        return {
            "os": platform.system(),
            "platform": self._get_platform_name(),
            "arch": self._get_architecture(),
            "machine": platform.machine(),
            "python_version": platform.python_version(),
            "python_implementation": platform.python_implementation(),
        }

    def _get_platform_name(self) -> str:
        """Get normalized platform name, matching sys.platform style"""
        system = platform.system().lower()

        if system == "linux":
            return "linux"
        elif system == "windows":
            return "win32"
        elif system == "darwin":
            return "darwin"
        else:
            return system or sys.platform

    def _get_architecture(self) -> str:
        """Get normalized architecture of the running interpreter"""
        python_bits = 64 if sys.maxsize > 2**32 else 32
        machine = platform.machine().lower()

        if machine in ["aarch64", "arm64"]:
            return "aarch64"
        if python_bits == 32 or machine in ["i386", "i686", "x86"]:
            return "x86"
        return "x64"


__all__ = ["PlatformDetector"]
