"""Typed view of a Rusted Warfare unit file.

The ``[core]`` keys listed in ``RwiniSectionCore`` are converted to typed
values; every other section and key is kept verbatim in ``Rwini.extras``.
"""

import logging
from dataclasses import dataclass, field
from typing import TypeVar

from adaptix import NameStyle, Retort, loader, name_mapping
from adaptix.load_error import AggregateLoadError, LoadError
from adaptix.provider import Provider

from rwini.errors import IniParseError, RwiniParseError, RwiniParseErrorType
from rwini.load_errors import extract_field_errors
from rwini.loaders import price_from_string, speed_from_string, unit_class_from_string
from rwini.locator import PropertyLocator
from rwini.model import Ini, IniSection
from rwini.parser import IniParser
from rwini.position import Position, Range
from rwini.values import Price, Speed, UnitClass

T = TypeVar("T")

logger = logging.getLogger("rwini")

CORE_SECTION = "core"

# reported when a document was loaded without its source text
UNKNOWN_LOCATION = Range(Position(1, 1), Position(1, 1))


@dataclass(frozen=True, slots=True, kw_only=True)
class RwiniSectionCore:
    name: str | None = None
    mass: int | None = None
    radius: int | None = None
    price: Price | None = None
    class_: UnitClass | None = None
    max_hp: int | None = None


@dataclass(frozen=True, slots=True)
class Rwini:
    core: RwiniSectionCore = field(default_factory=RwiniSectionCore)
    extras: Ini = field(default_factory=Ini)


class RwiniParser:
    def __init__(self) -> None:
        self._ini_parser = IniParser()
        self._retort = self.create_retort()

    @staticmethod
    def _value_loaders() -> list[Provider]:
        return [
            loader(Price, price_from_string),
            loader(Speed, speed_from_string),
            loader(UnitClass, unit_class_from_string),
        ]

    def create_retort(self) -> Retort:
        # snake_case fields read camelCase keys, a trailing "_" is trimmed
        return Retort(
            strict_coercion=False,
            recipe=[
                *self._value_loaders(),
                name_mapping(name_style=NameStyle.CAMEL),
            ],
        )

    def _parse_ini(self, src: str) -> Ini:
        try:
            return self._ini_parser.parse(src)
        except IniParseError as exc:
            raise RwiniParseError(
                kind=RwiniParseErrorType.SYNTAX_ERROR,
                location=exc.location,
                syntax_error=exc,
            ) from exc

    def _load(self, ini: Ini, src: str | None, section: str, schema: type[T]) -> T:
        data = dict(ini[section]) if section in ini else {}
        logger.debug(
            "[%s] load: section=%r, target=%s, keys=%s",
            type(self).__name__,
            section,
            schema.__name__,
            sorted(data),
        )
        try:
            return self._retort.load(data, schema)
        except (AggregateLoadError, LoadError) as exc:
            locator = PropertyLocator(src) if src is not None else None
            located = [
                (self._locate(locator, section, field_error.key_path), field_error.message)
                for field_error in extract_field_errors(exc)
            ]
            location, message = min(
                located,
                key=lambda item: (item[0].start.row, item[0].start.column),
            )
            raise RwiniParseError(
                kind=RwiniParseErrorType.INVALID_VALUE,
                location=location,
                message=message,
            ) from exc

    @staticmethod
    def _locate(locator: PropertyLocator | None, section: str, key_path: list[str]) -> Range:
        if locator is None:
            return UNKNOWN_LOCATION
        if key_path:
            found = locator.find_range(section, key_path[0])
            if found is not None:
                return found
        return locator.find_section_range(section) or locator.document_range()

    def parse(self, src: str) -> Rwini:
        ini = self._parse_ini(src)
        core = self._load(ini, src, CORE_SECTION, RwiniSectionCore)

        core_section = ini.get(CORE_SECTION)
        if core_section is not None:
            consumed = {
                key for key, value in self._retort.dump(core, RwiniSectionCore).items() if value is not None
            }
            leftover = IniSection(
                CORE_SECTION,
                {key: value for key, value in core_section.items() if key not in consumed},
            )
            if leftover:
                ini.insert_section(leftover)
            else:
                ini.remove_section(CORE_SECTION)

        return Rwini(core=core, extras=ini)

    def parse_section(self, src: str, section: str, schema: type[T]) -> T:
        """Parse ``src`` and load one section into ``schema``.

        ``schema`` is a dataclass whose snake_case fields name the camelCase
        keys of the section.
        """
        return self.load_section(self._parse_ini(src), section, schema, src=src)

    def load_section(self, ini: Ini, section: str, schema: type[T], *, src: str | None = None) -> T:
        """Load one section of an already parsed document into ``schema``.

        Errors point into ``src`` when it is given, otherwise at ``(1, 1)``.
        """
        return self._load(ini, src, section, schema)
