"""
Signature module for gotagger.

This module renders Go type expressions and field lists into
canonical signature strings.
"""

from gotagger.signature.formatter import (
    format_type,
    format_signature,
    render_field_list,
)

__all__ = [
    "format_type",
    "format_signature",
    "render_field_list",
]
