# Path: core/pipeline/__init__.py
# Purpose: Package initializer for pipeline orchestration.
# Layer: core/pipeline.
# Details: Exposes the parallel icon pipeline.

from .orchestrator import IconPipeline

__all__ = ["IconPipeline"]
