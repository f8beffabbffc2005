from rwini.errors import IniParseError, IniParseErrorType, RwiniError, RwiniParseError, RwiniParseErrorType
from rwini.model import Ini, IniProperty, IniSection
from rwini.parser import IniParser, parse
from rwini.position import Position, Range
from rwini.render import render_ini
from rwini.rwini import Rwini, RwiniParser, RwiniSectionCore
from rwini.values import Price, Speed, SpeedUnit, UnitClass

__all__ = [
    "Ini",
    "IniParseError",
    "IniParseErrorType",
    "IniParser",
    "IniProperty",
    "IniSection",
    "Position",
    "Price",
    "Range",
    "Rwini",
    "RwiniError",
    "RwiniParseError",
    "RwiniParseErrorType",
    "RwiniParser",
    "RwiniSectionCore",
    "Speed",
    "SpeedUnit",
    "UnitClass",
    "parse",
    "render_ini",
]
