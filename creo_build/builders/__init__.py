"""
Builder components for the CSS variants
"""

from .sass_compiler import SassCompiler
from .lean_source import LeanSourceSynthesizer
from .variant_builder import VariantBuilder, ExpandedBuilder, CompressedBuilder, LeanBuilder
from .orchestrator import BuildOrchestrator

__all__ = [
    "SassCompiler",
    "LeanSourceSynthesizer",
    "VariantBuilder",
    "ExpandedBuilder",
    "CompressedBuilder",
    "LeanBuilder",
    "BuildOrchestrator"
]
