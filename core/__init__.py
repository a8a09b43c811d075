# Path: core/__init__.py
# Purpose: Package initializer for core application layer.
# Layer: core.
# Details: Aggregates subpackages for scanning, decoding, per-icon stages, the pipeline, and models.
