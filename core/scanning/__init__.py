# Path: core/scanning/__init__.py
# Purpose: Package initializer for filesystem scanning.
# Layer: core/scanning.
# Details: Exposes the tree walker that feeds the pipeline.

from .walker import SkipHook, TreeWalker

__all__ = ["SkipHook", "TreeWalker"]
