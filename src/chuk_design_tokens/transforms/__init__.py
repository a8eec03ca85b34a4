"""
Transforms - rewrite token attributes, names and values.

Value transforms are plain functions in ``values``; ``registry`` binds
them to matchers under the names a build config refers to.
"""

from chuk_design_tokens.transforms.registry import (
    TRANSFORMS,
    Transform,
    TransformPipeline,
    get_transform,
    kebab_case,
)

__all__ = [
    "TRANSFORMS",
    "Transform",
    "TransformPipeline",
    "get_transform",
    "kebab_case",
]
