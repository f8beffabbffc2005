"""In-memory document built by the parser.

Sections and properties keep insertion order; a replaced entry keeps the
slot of the entry it replaced. Equality ignores order.
"""

from collections.abc import Iterable, Iterator, Mapping, MutableMapping
from dataclasses import dataclass

from rwini.render import render_ini, render_section


@dataclass(frozen=True, slots=True)
class IniProperty:
    key: str
    value: str

    def __str__(self) -> str:
        return f"{self.key}:{self.value}"


class IniSection(MutableMapping[str, str]):
    def __init__(self, name: str, properties: Mapping[str, str] | None = None) -> None:
        self.name = name
        self._properties: dict[str, str] = dict(properties or {})

    def insert_property(self, prop: IniProperty) -> IniProperty | None:
        previous = self._properties.get(prop.key)
        self._properties[prop.key] = prop.value
        if previous is None:
            return None
        return IniProperty(prop.key, previous)

    def remove_property(self, key: str) -> IniProperty | None:
        if key not in self._properties:
            return None
        return IniProperty(key, self._properties.pop(key))

    def contains_key(self, key: str) -> bool:
        return key in self._properties

    def value(self, key: str) -> str | None:
        return self._properties.get(key)

    def properties(self) -> list[IniProperty]:
        return [IniProperty(key, value) for key, value in self._properties.items()]

    def __getitem__(self, key: str) -> str:
        return self._properties[key]

    def __setitem__(self, key: str, value: str) -> None:
        self._properties[key] = value

    def __delitem__(self, key: str) -> None:
        del self._properties[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._properties)

    def __len__(self) -> int:
        return len(self._properties)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, IniSection):
            return NotImplemented
        return self.name == other.name and self._properties == other._properties

    def __repr__(self) -> str:
        return f"IniSection({self.name!r}, {self._properties!r})"

    def __str__(self) -> str:
        return render_section(self)


class Ini(MutableMapping[str, IniSection]):
    def __init__(self, sections: Iterable[IniSection] = ()) -> None:
        self._sections: dict[str, IniSection] = {}
        for section in sections:
            self.insert_section(section)

    def insert_section(self, section: IniSection) -> IniSection | None:
        previous = self._sections.get(section.name)
        self._sections[section.name] = section
        return previous

    def remove_section(self, name: str) -> IniSection | None:
        return self._sections.pop(name, None)

    def to_dict(self) -> dict[str, dict[str, str]]:
        return {name: dict(section) for name, section in self._sections.items()}

    def __getitem__(self, name: str) -> IniSection:
        return self._sections[name]

    def __setitem__(self, name: str, section: IniSection) -> None:
        if section.name != name:
            msg = f"Section {section.name!r} cannot be stored under name {name!r}"
            raise ValueError(msg)
        self._sections[name] = section

    def __delitem__(self, name: str) -> None:
        del self._sections[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._sections)

    def __len__(self) -> int:
        return len(self._sections)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Ini):
            return NotImplemented
        return self._sections == other._sections

    def __repr__(self) -> str:
        return f"Ini({list(self._sections.values())!r})"

    def __str__(self) -> str:
        return render_ini(self)
