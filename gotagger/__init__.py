"""
gotagger Engine

Core engine for scanning Go source, classifying top-level functions and
methods, inferring constructor owners, and rendering canonical type
signatures.
"""

from gotagger.models import Tag, TagKind, ScanResult

__all__ = ["Tag", "TagKind", "ScanResult"]
__version__ = "0.1.0"
