"""
Resolver module for gotagger.

This module classifies declarations as methods or functions and
infers owning types for constructor-like functions.
"""

from gotagger.resolver.registry import TypeRegistry
from gotagger.resolver.receiver import Resolution, resolve_receiver

__all__ = [
    "TypeRegistry",
    "Resolution",
    "resolve_receiver",
]
