from rwini.parser import COMMENT_PREFIX, KEY_VALUE_SEPARATOR, MULTILINE_MARKERS
from rwini.position import Position, Range


class PropertyLocator:
    """Find where a property is defined in rwini source text.

    Later definitions win, the same way the parser keeps the last value of a
    repeated key or section.
    """

    def __init__(self, content: str) -> None:
        self._lines = content.split("\n")

    def find_range(self, section: str, key: str) -> Range | None:
        found: Range | None = None
        current_section: str | None = None
        terminator: str | None = None
        multiline_start: Position | None = None
        multiline_key: str | None = None

        for row, line in enumerate(self._lines, 1):
            stripped = line.strip()

            if terminator is not None:
                if not stripped.endswith(terminator):
                    continue
                if multiline_start is not None and multiline_key == key and current_section == section:
                    found = Range(multiline_start, Position.at_line_end(row, line))
                terminator = None
                continue

            if not stripped or stripped.startswith(COMMENT_PREFIX):
                continue

            if current_section is not None and KEY_VALUE_SEPARATOR in line:
                raw_key, _, raw_value = line.partition(KEY_VALUE_SEPARATOR)
                value = raw_value.strip()
                marker = next((m for m in MULTILINE_MARKERS if value.startswith(m)), None)
                if marker is not None:
                    terminator = marker
                    multiline_key = raw_key.strip()
                    multiline_start = Position(row, 1)
                elif raw_key.strip() == key and current_section == section:
                    found = Range.line(row, line)
                continue

            if stripped.startswith("[") and stripped.endswith("]"):
                current_section = stripped[1:-1]
                if current_section == section:
                    # a redefined section replaces everything seen before
                    found = None

        return found

    def find_section_range(self, section: str) -> Range | None:
        found: Range | None = None
        for row, line in enumerate(self._lines, 1):
            stripped = line.strip()
            if stripped == f"[{section}]":
                found = Range.line(row, line)
        return found

    def document_range(self) -> Range:
        last_row = len(self._lines)
        return Range(Position(1, 1), Position.at_line_end(last_row, self._lines[-1]))
