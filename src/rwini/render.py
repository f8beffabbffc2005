from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from rwini.model import Ini, IniSection


def render_section(section: "IniSection") -> str:
    lines = [f"[{section.name}]"]
    lines.extend(f"{key}:{section[key]}" for key in sorted(section))
    return "\n".join(lines)


def render_ini(ini: "Ini") -> str:
    """Render a document back to text.

    Sections and keys are written in lexical order so equal documents
    always render to the same text.
    """
    return "\n".join(render_section(ini[name]) for name in sorted(ini))
