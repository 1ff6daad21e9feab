"""Frontmatter data models: raw Pelican fields and normalized YAML-ready fields"""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping, Union


# Pelican field name (case as found) -> raw value. Later duplicates overwrite earlier ones.
RawFrontMatter = dict[str, str]


@dataclass(frozen=True)
class Scalar:
    """A single textual value, rendered as key: "value"."""
    value: str


@dataclass(frozen=True)
class ListField:
    """An ordered list of values, rendered as a YAML sequence."""
    items: tuple[str, ...]

    def __init__(self, items):
        object.__setattr__(self, "items", tuple(items))


FieldValue = Union[Scalar, ListField]


class NormalizedFrontMatter(Mapping[str, FieldValue]):
    """Read-only mapping of lower-cased field name -> FieldValue.

    Iteration follows insertion order; callers that need a stable order
    (render) sort the keys themselves.
    """

    def __init__(self, fields: Mapping[str, FieldValue] = None):
        self._fields = MappingProxyType(dict(fields or {}))

    def __getitem__(self, key: str) -> FieldValue:
        return self._fields[key]

    def __iter__(self):
        return iter(self._fields)

    def __len__(self) -> int:
        return len(self._fields)

    def __eq__(self, other) -> bool:
        if isinstance(other, Mapping):
            return dict(self._fields) == dict(other)
        return NotImplemented

    def __repr__(self) -> str:
        return f"NormalizedFrontMatter({dict(self._fields)!r})"
