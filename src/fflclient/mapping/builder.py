"""Generic construction of entities from a response map."""

from __future__ import annotations

from typing import Any, ClassVar, Dict, Iterable, List, Mapping, Optional, Type, TypeVar

from pydantic import BaseModel
from pydantic.config import ConfigDict

from fflclient.errors import MappingError
from fflclient.mapping.schema import MISSING, ConstructionParams, CustomRule, MappingSchema


class Entity(BaseModel):
    """Base for every domain object produced from an upstream payload.

    Subclasses declare their pydantic fields plus a ``response_map`` describing how each
    field is read from the raw document. Fields whose rule resolves to ``MISSING`` stay
    unset, so ``to_dict`` reflects exactly what the upstream provided.
    """

    response_map: ClassVar[Optional[MappingSchema]] = None

    model_config = ConfigDict(frozen=True)

    @classmethod
    def on_populate(cls, values: Dict[str, Any]) -> Dict[str, Any]:
        """Adjust the populated field record before validation."""

        return values

    @classmethod
    def from_response(
        cls: Type[E],
        document: Mapping[str, Any],
        params: ConstructionParams | None = None,
    ) -> E:
        return build(cls, document, params)

    def to_dict(self) -> dict[str, Any]:
        return self.model_dump(exclude_unset=True)


E = TypeVar("E", bound=Entity)


def build(
    entity_cls: Type[E],
    document: Mapping[str, Any],
    params: ConstructionParams | None = None,
) -> E:
    """Populate ``entity_cls`` from ``document`` using its response map."""

    schema = entity_cls.response_map
    if schema is None:
        raise MappingError(f"{entity_cls.__name__} does not declare a response_map")
    if not isinstance(document, Mapping):
        raise MappingError(
            f"{entity_cls.__name__} expects a JSON object, got {type(document).__name__}"
        )
    unknown = [name for name in schema if name not in entity_cls.model_fields]
    if unknown:
        raise MappingError(f"{entity_cls.__name__} has no fields named {unknown}")

    params = params or ConstructionParams()
    values: Dict[str, Any] = {}
    for name, rule in schema.items():
        value = rule.resolve(document, params)
        if value is not MISSING:
            values[name] = value
    values = entity_cls.on_populate(values)
    return entity_cls.model_validate(values)


def build_many(
    entity_cls: Type[E],
    documents: Iterable[Mapping[str, Any]] | None,
    params: ConstructionParams | None = None,
) -> List[E]:
    if not documents:
        return []
    return [build(entity_cls, document, params) for document in documents]


def nested(entity_cls: Type[Entity]):
    """Extractor that builds ``entity_cls`` from the rule's sub-document."""

    def extract(raw, document, params):
        if raw is None:
            return MISSING
        return build(entity_cls, raw, params)

    return extract


def from_params(name: str) -> CustomRule:
    """Rule that copies a construction parameter onto the entity when it is set."""

    def extract(raw, document, params):
        value = getattr(params, name)
        return MISSING if value is None else value

    return CustomRule(None, extract)
