# Path: config/__init__.py
# Purpose: Package initializer for configuration module.
# Layer: config.
# Details: Exposes the run settings model and its defaults.

from .settings import DEFAULT_EXTENSIONS, DEFAULT_SIZE_LADDER, ScanSettings

__all__ = ["ScanSettings", "DEFAULT_EXTENSIONS", "DEFAULT_SIZE_LADDER"]
