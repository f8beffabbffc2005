from enum import StrEnum

from rwini.position import Range


class IniParseErrorType(StrEnum):
    UNKNOWN = "Unknown"
    UNKNOWN_LINE_BEFORE_ANY_SECTION = "UnknownLineBeforeAnySection"
    UNKNOWN_LINE_IN_SECTION = "UnknownLineInSection"
    REPEATED_KEY = "RepeatedKey"
    ENDLESS_MULTILINE = "EndlessMultiline"


class RwiniParseErrorType(StrEnum):
    SYNTAX_ERROR = "SyntaxError"
    INVALID_VALUE = "InvalidValue"
    UNKNOWN = "Unknown"


def _render_error(kind: StrEnum, location: Range, message: str) -> str:
    return f"type:{kind}, range:{location}, msg:{message}"


class RwiniError(Exception):
    """Base error of rwini."""


class IniParseError(RwiniError):
    def __init__(
        self,
        *,
        kind: IniParseErrorType,
        location: Range,
        message: str = "",
    ) -> None:
        self.kind = kind
        self.location = location
        self.message = message
        super().__init__(self._format())

    def _format(self) -> str:
        return _render_error(self.kind, self.location, self.message)


class RwiniParseError(RwiniError):
    """Failure of the typed layer.

    A ``SyntaxError`` kind nests the underlying ``IniParseError`` in
    ``syntax_error``; an ``InvalidValue`` kind points at the property whose
    value could not be converted.
    """

    def __init__(
        self,
        *,
        kind: RwiniParseErrorType,
        location: Range,
        message: str = "",
        syntax_error: IniParseError | None = None,
    ) -> None:
        self.kind = kind
        self.location = location
        self.message = message
        self.syntax_error = syntax_error
        super().__init__(self._format())

    def _format(self) -> str:
        return _render_error(self.kind, self.location, self.message)
