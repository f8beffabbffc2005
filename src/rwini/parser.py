"""Line-oriented parser for the rwini dialect.

Each line is fed to a step function together with the state left by the
previous line. The step returns the next state or raises the first fatal
``IniParseError``; nothing is collected past it.
"""

import logging
from dataclasses import dataclass, replace
from typing import TypeAlias

from rwini.errors import IniParseError, IniParseErrorType
from rwini.model import Ini, IniProperty, IniSection
from rwini.position import Position, Range

logger = logging.getLogger("rwini")

MULTILINE_MARKERS = ('"""', "'''")
COMMENT_PREFIX = "#"
KEY_VALUE_SEPARATOR = ":"


@dataclass(frozen=True, slots=True)
class SourceLine:
    row: int
    raw: str
    stripped: str

    @property
    def is_blank_or_comment(self) -> bool:
        return not self.stripped or self.stripped.startswith(COMMENT_PREFIX)

    @property
    def header_name(self) -> str | None:
        if self.stripped.startswith("[") and self.stripped.endswith("]"):
            return self.stripped[1:-1]
        return None

    @property
    def location(self) -> Range:
        return Range.line(self.row, self.raw)


@dataclass(frozen=True, slots=True)
class PendingMultiline:
    terminator: str
    location: Range
    key: str
    value: str


@dataclass(frozen=True, slots=True)
class NoSectionOpen:
    pass


@dataclass(frozen=True, slots=True)
class BuildingSection:
    section: IniSection
    multiline: PendingMultiline | None = None


ParserState: TypeAlias = NoSectionOpen | BuildingSection


@dataclass(frozen=True, slots=True, kw_only=True)
class IniParser:
    error_if_unknown_line_before_any_section: bool = True
    error_if_unknown_line_in_section: bool = True
    error_if_repeated_key: bool = False
    error_if_endless_multiline: bool = True

    def parse(self, src: str) -> Ini:
        ini = Ini()
        state: ParserState = NoSectionOpen()
        for row, raw in enumerate(src.split("\n"), 1):
            state = self._step(ini, state, SourceLine(row, raw, raw.strip()))
        return self._finish(ini, state)

    def _step(self, ini: Ini, state: ParserState, line: SourceLine) -> ParserState:
        match state:
            case NoSectionOpen():
                return self._before_any_section(line)
            case BuildingSection(section=section, multiline=PendingMultiline() as pending):
                return self._continue_multiline(section, pending, line)
            case BuildingSection(section=section):
                return self._in_section(ini, section, line)

    def _before_any_section(self, line: SourceLine) -> ParserState:
        name = line.header_name
        if name is not None:
            return BuildingSection(IniSection(name))
        if line.is_blank_or_comment:
            return NoSectionOpen()
        if self.error_if_unknown_line_before_any_section:
            raise IniParseError(
                kind=IniParseErrorType.UNKNOWN_LINE_BEFORE_ANY_SECTION,
                location=line.location,
            )
        logger.debug("[IniParser] skipped line %d before any section: %r", line.row, line.raw)
        return NoSectionOpen()

    @staticmethod
    def _continue_multiline(
        section: IniSection,
        pending: PendingMultiline,
        line: SourceLine,
    ) -> ParserState:
        if line.stripped.endswith(pending.terminator):
            tail = line.raw.rstrip().removesuffix(pending.terminator)
            section.insert_property(IniProperty(pending.key, pending.value + tail))
            return BuildingSection(section)

        location = Range(pending.location.start, Position.at_line_end(line.row, line.raw))
        return BuildingSection(
            section,
            replace(pending, location=location, value=pending.value + line.raw),
        )

    def _in_section(self, ini: Ini, section: IniSection, line: SourceLine) -> ParserState:
        if line.is_blank_or_comment:
            return BuildingSection(section)

        if KEY_VALUE_SEPARATOR in line.raw:
            return self._property(section, line)

        name = line.header_name
        if name is not None:
            ini.insert_section(section)
            return BuildingSection(IniSection(name))

        if self.error_if_unknown_line_in_section:
            raise IniParseError(
                kind=IniParseErrorType.UNKNOWN_LINE_IN_SECTION,
                location=line.location,
            )
        logger.debug("[IniParser] skipped line %d in section %r: %r", line.row, section.name, line.raw)
        return BuildingSection(section)

    def _property(self, section: IniSection, line: SourceLine) -> ParserState:
        raw_key, _, raw_value = line.raw.partition(KEY_VALUE_SEPARATOR)
        key = raw_key.strip()
        value = raw_value.strip()

        for marker in MULTILINE_MARKERS:
            if value.startswith(marker):
                # 1-based column of the marker in the raw line
                column = len(raw_key) + len(KEY_VALUE_SEPARATOR) + raw_value.index(marker) + 1
                location = Range(
                    Position(line.row, column),
                    Position.at_line_end(line.row, line.raw),
                )
                pending = PendingMultiline(marker, location, key, value.removeprefix(marker))
                return BuildingSection(section, pending)

        if section.insert_property(IniProperty(key, value)) is not None:
            if self.error_if_repeated_key:
                raise IniParseError(kind=IniParseErrorType.REPEATED_KEY, location=line.location)
            logger.debug("[IniParser] key %r repeated in section %r at line %d", key, section.name, line.row)
        return BuildingSection(section)

    def _finish(self, ini: Ini, state: ParserState) -> Ini:
        if isinstance(state, BuildingSection):
            pending = state.multiline
            if pending is not None:
                if self.error_if_endless_multiline:
                    raise IniParseError(
                        kind=IniParseErrorType.ENDLESS_MULTILINE,
                        location=pending.location,
                    )
                logger.debug(
                    "[IniParser] discarded unterminated value of %r started at %s",
                    pending.key,
                    pending.location.start,
                )
            ini.insert_section(state.section)

        logger.debug("[IniParser] parsed sections=%s", list(ini))
        return ini


def parse(src: str, parser: IniParser | None = None) -> Ini:
    if parser is None:
        parser = IniParser()
    return parser.parse(src)
