"""Gallery data model — parsed line records, index entries, query filters."""

from dataclasses import dataclass, field
from enum import Enum


class LogicMode(Enum):
    DISABLED = "disabled"
    OR = "or"
    AND = "and"
    NOT = "not"

    @classmethod
    def parse(cls, value: str) -> "LogicMode":
        """Map a user-supplied mode name to a LogicMode (case-insensitive).

        "disable" is accepted as an alias for "disabled". Raises ValueError
        for anything else.
        """
        name = value.strip().lower()
        if name == "disable":
            return cls.DISABLED
        return cls(name)


class SourcePolicy(Enum):
    EXPLICIT = "explicit"   # sourceData is a list of document names
    VIRTUAL = "virtual"     # sourceData is a list of marker strings


@dataclass(frozen=True)
class RawTextBlock:
    lines: list[str]
    source_name: str

    @classmethod
    def from_content(cls, content: str, source_name: str) -> "RawTextBlock":
        return cls(lines=content.split("\n"), source_name=source_name)


@dataclass(frozen=True)
class ParsedLineRecord:
    item_id: str
    source_name: str
    properties: list[str] = field(default_factory=list)


@dataclass
class IndexEntry:
    """Aggregated record for one item.

    sources and properties keep first-seen order; the companion sets give
    value-equality membership so nothing is stored twice.
    """

    item_id: str
    sources: list[str] = field(default_factory=list)
    properties: list[str] = field(default_factory=list)
    _source_set: set[str] = field(default_factory=set, init=False, repr=False, compare=False)
    _property_set: set[str] = field(default_factory=set, init=False, repr=False, compare=False)

    def __post_init__(self):
        sources, properties = self.sources, self.properties
        self.sources, self.properties = [], []
        for source in sources:
            self.add_source(source)
        for prop in properties:
            self.add_property(prop)

    def add_source(self, source: str) -> None:
        if source not in self._source_set:
            self._source_set.add(source)
            self.sources.append(source)

    def add_property(self, prop: str) -> None:
        if prop not in self._property_set:
            self._property_set.add(prop)
            self.properties.append(prop)

    def to_dict(self) -> dict:
        return {
            "item": self.item_id,
            "sources": list(self.sources),
            "properties": list(self.properties),
        }


FullIndex = dict[str, IndexEntry]


@dataclass(frozen=True)
class FieldQuery:
    mode: LogicMode = LogicMode.DISABLED
    terms: tuple[str, ...] = ()


@dataclass(frozen=True)
class QueryFilter:
    identifier: FieldQuery = field(default_factory=FieldQuery)
    source: FieldQuery = field(default_factory=FieldQuery)
    property: FieldQuery = field(default_factory=FieldQuery)


@dataclass
class Suggestions:
    filenames: list[str] = field(default_factory=list)
    galleries: list[str] = field(default_factory=list)
    properties: list[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "filenames": list(self.filenames),
            "galleries": list(self.galleries),
            "properties": list(self.properties),
        }
