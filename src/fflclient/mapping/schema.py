"""Declarative field rules describing how an entity is read from a JSON document."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Any, Callable, Iterator, Mapping, Optional, Tuple, Union

from fflclient.errors import MappingError


class _Missing:
    _instance: Optional["_Missing"] = None

    def __new__(cls) -> "_Missing":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "MISSING"

    def __bool__(self) -> bool:
        return False


MISSING: Any = _Missing()

_PATH_TOKEN = re.compile(r"([^.\[\]]+)|\[(\d+)\]")


def parse_path(path: str) -> Tuple[Union[str, int], ...]:
    """Split ``"a.b[0].c"`` into ``("a", "b", 0, "c")``."""

    if not isinstance(path, str) or not path.strip():
        raise MappingError(f"path must be a non-empty string, got {path!r}")
    steps: list[Union[str, int]] = []
    position = 0
    for match in _PATH_TOKEN.finditer(path):
        separator = path[position:match.start()]
        if separator not in ("", "."):
            raise MappingError(f"malformed path {path!r}")
        if separator == "." and (not steps or match.group(2) is not None):
            raise MappingError(f"malformed path {path!r}")
        # A key after an index needs a dot: "a[0].b", never "a[0]b".
        if separator == "" and steps and match.group(1) is not None:
            raise MappingError(f"malformed path {path!r}")
        key, index = match.groups()
        steps.append(key if key is not None else int(index))
        position = match.end()
    if position != len(path) or not steps:
        raise MappingError(f"malformed path {path!r}")
    return tuple(steps)


def lookup(document: Any, steps: Tuple[Union[str, int], ...]) -> Any:
    current = document
    for step in steps:
        if isinstance(step, int):
            if not isinstance(current, (list, tuple)) or step >= len(current):
                return MISSING
            current = current[step]
        else:
            if not isinstance(current, Mapping) or step not in current:
                return MISSING
            current = current[step]
    return current


@dataclass(frozen=True)
class ConstructionParams:
    """Caller context threaded into every custom extractor during one build."""

    league_id: Optional[int] = None
    season_id: Optional[int] = None
    player_id: Optional[int] = None
    scoring_period_id: Optional[int] = None
    scoring_rule: Optional[Callable[[Mapping[int, float]], float]] = None


Extractor = Callable[[Any, Mapping[str, Any], ConstructionParams], Any]


@dataclass(frozen=True)
class PathRule:
    path: str
    steps: Tuple[Union[str, int], ...] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "steps", parse_path(self.path))

    def resolve(self, document: Mapping[str, Any], params: ConstructionParams) -> Any:
        return lookup(document, self.steps)


@dataclass(frozen=True)
class CustomRule:
    """Compute a field from ``extract(sub_document, document, params)``.

    ``key`` names the slice of the document handed over as ``sub_document`` (``None``
    when that slice is absent). With ``key=None`` the whole document is passed.
    """

    key: Optional[str]
    extract: Extractor
    steps: Tuple[Union[str, int], ...] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        if not callable(self.extract):
            raise MappingError(f"extract for key {self.key!r} is not callable")
        steps = parse_path(self.key) if self.key is not None else ()
        object.__setattr__(self, "steps", steps)

    def resolve(self, document: Mapping[str, Any], params: ConstructionParams) -> Any:
        if self.steps:
            sub_document = lookup(document, self.steps)
            if sub_document is MISSING:
                sub_document = None
        else:
            sub_document = document
        return self.extract(sub_document, document, params)


FieldRule = Union[PathRule, CustomRule]


class MappingSchema(Mapping[str, FieldRule]):
    """Ordered, read-only mapping from output field name to its rule."""

    def __init__(self, rules: Mapping[str, Union[str, FieldRule]]):
        resolved: dict[str, FieldRule] = {}
        for name, rule in rules.items():
            if isinstance(rule, str):
                rule = PathRule(rule)
            elif not isinstance(rule, (PathRule, CustomRule)):
                raise MappingError(f"field {name!r} has unsupported rule {rule!r}")
            resolved[name] = rule
        self._rules = resolved

    def __getitem__(self, name: str) -> FieldRule:
        return self._rules[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._rules)

    def __len__(self) -> int:
        return len(self._rules)

    def __repr__(self) -> str:
        return f"MappingSchema({list(self._rules)!r})"
