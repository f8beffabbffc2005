"""RwiniParser reads [core] into typed fields and keeps the rest as extras."""

from dataclasses import dataclass
from pathlib import Path

from rwini import RwiniParser, Speed

SOURCES_DIR = Path(__file__).parent / "sources"


@dataclass
class Movement:
    move_speed: Speed
    turn_speed: Speed | None = None


source = (SOURCES_DIR / "tank.ini").read_text(encoding="utf-8")
parser = RwiniParser()

unit = parser.parse(source)
print(f"core: {unit.core}")
print(f"extras:\n{unit.extras}")

movement = parser.parse_section(source, "movement", Movement)
print(f"movement: {movement}")
