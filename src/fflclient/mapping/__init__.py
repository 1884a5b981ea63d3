"""Declarative response mapping: schemas, rules and the entity builder."""

from .builder import Entity, build, build_many, from_params, nested
from .schema import (
    MISSING,
    ConstructionParams,
    CustomRule,
    FieldRule,
    MappingSchema,
    PathRule,
    lookup,
    parse_path,
)

__all__ = [
    "MISSING",
    "ConstructionParams",
    "CustomRule",
    "Entity",
    "FieldRule",
    "MappingSchema",
    "PathRule",
    "build",
    "build_many",
    "from_params",
    "lookup",
    "nested",
    "parse_path",
]
