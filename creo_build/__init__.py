"""
Creo CSS build tool
Compiles the Creo framework into expanded, compressed and lean CSS bundles
"""

__version__ = "1.0.0"

from .main import BuildSystem, main

__all__ = ["BuildSystem", "main", "__version__"]
