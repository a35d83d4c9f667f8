"""Holds exceptions raised by the Creo build tool"""


class CreoBuildError(RuntimeError):
    """Base exception for fatal build errors"""


class ConfigError(CreoBuildError):
    """Raised when the build configuration or package manifest is unusable"""


class DependencyMissingError(CreoBuildError):
    """Raised when sass is unavailable even after trying to install it"""


class CompileError(CreoBuildError):
    """Raised when a variant fails to compile"""


class BuildFilesystemError(CreoBuildError):
    """Raised when the output directory cannot be cleaned or created"""
