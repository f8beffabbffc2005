"""rwini.parse() on a unit file, then a lenient parser on broken input."""

from pathlib import Path

from rwini import IniParseError, IniParser, parse

SOURCES_DIR = Path(__file__).parent / "sources"

ini = parse((SOURCES_DIR / "tank.ini").read_text(encoding="utf-8"))

for name, section in ini.items():
    print(f"[{name}] {dict(section)}")

broken = "stray line\n[core]\nname: scout\nprice: '''100"

try:
    parse(broken)
except IniParseError as exc:
    print(f"strict: {exc}")

lenient = IniParser(
    error_if_unknown_line_before_any_section=False,
    error_if_endless_multiline=False,
)
print(f"lenient: {lenient.parse(broken).to_dict()}")
