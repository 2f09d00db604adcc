"""Adapters: schema conversion, annotation mapping, error mapping."""

from zuglang_tools.adapters.annotations import AnnotationMapper
from zuglang_tools.adapters.errors import ErrorMapper
from zuglang_tools.adapters.schema import SchemaConverter

__all__ = ["AnnotationMapper", "ErrorMapper", "SchemaConverter"]
