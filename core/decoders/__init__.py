# Path: core/decoders/__init__.py
# Purpose: Package initializer for icon decoders.
# Layer: core/decoders.
# Details: Exposes the decoder interface and the Pillow/icoextract implementation.

from .base import IconDecoder
from .pillow_decoder import PillowIconDecoder

__all__ = ["IconDecoder", "PillowIconDecoder"]
