# launcher/display/ini.py
from __future__ import annotations
import re
from dataclasses import dataclass

from launcher.core.errors import IniParseError

__all__ = ["GLOBAL_SECTION", "IniDocument", "formatIniValue"]


GLOBAL_SECTION = "" # entries before the first [section] header

_NEWLINE_RE = re.compile(r"(\r?\n)")
_COMMENT_PREFIXES = ("#", ";")
_TRUE = {"true", "1", "yes", "on"}
_FALSE = {"false", "0", "no", "off"}



@dataclass(slots=True)
class _Line:
    raw: str
    kind: str                  # "blank" | "comment" | "section" | "entry"
    section: str               # Section the line belongs to (header lines: their own name)
    key: str | None = None
    valueStart: int = 0        # Offset of the value inside `raw` for entry lines
    eol: str = "\n"            # The line's own terminator; "" for an unterminated last line

    @property
    def value(self) -> str | None:
        if self.kind != "entry":
            return None
        return self.raw[self.valueStart:].strip()



def formatIniValue(value: object) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)



def _parseLine(raw: str, lineNo: int, section: str) -> _Line:
    stripped = raw.strip()
    if not stripped:
        return _Line(raw, "blank", section)
    if stripped.startswith(_COMMENT_PREFIXES):
        return _Line(raw, "comment", section)
    if stripped.startswith("["):
        if not stripped.endswith("]") or len(stripped) < 3:
            raise IniParseError(lineNo, raw, "malformed section header")
        return _Line(raw, "section", stripped[1:-1].strip())
    eq = raw.find("=")
    if eq < 0:
        raise IniParseError(lineNo, raw, "expected 'key=value'")
    key = raw[:eq].strip()
    if not key:
        raise IniParseError(lineNo, raw, "empty key")
    valueStart = eq + 1
    # Keep the whitespace after '=' as part of the prefix so rewrites match the original style
    while valueStart < len(raw) and raw[valueStart] in " \t":
        valueStart += 1
    return _Line(raw, "entry", section, key=key, valueStart=valueStart)



class IniDocument:
    """
    Line-oriented key=value document with [sections] and '#'/';' comments.

    Untouched lines are reproduced byte-for-byte by dumps(), including comments,
    blank lines, spacing around '=' and each line's own terminator, so files
    with mixed newlines keep them. Lines added by set() use `newline`, the
    first terminator seen in the file. Section and key lookups are
    case-insensitive; the file's own spelling is kept.
    """

    def __init__(self, lines: list[_Line], *, newline: str = "\n") -> None:
        self._lines = lines
        self.newline = newline

    # ----- Parse / serialize -----

    @classmethod
    def parse(cls, text: str) -> IniDocument:
        # split() with a capture group alternates text and terminators
        parts = _NEWLINE_RE.split(text)
        newline = parts[1] if len(parts) > 1 else "\n"

        lines: list[_Line] = []
        section = GLOBAL_SECTION
        for idx in range(0, len(parts), 2):
            raw = parts[idx]
            eol = parts[idx + 1] if idx + 1 < len(parts) else ""
            if not raw and not eol:
                break # Nothing after the final terminator
            line = _parseLine(raw, idx // 2 + 1, section)
            line.eol = eol
            if line.kind == "section":
                section = line.section
            lines.append(line)
        return cls(lines, newline=newline)

    def dumps(self) -> str:
        return "".join(line.raw + line.eol for line in self._lines)

    def _insert(self, index: int, line: _Line) -> None:
        line.eol = self.newline
        if index == len(self._lines) and self._lines and self._lines[-1].eol == "":
            # Keep a missing final newline missing
            self._lines[-1].eol = self.newline
            line.eol = ""
        self._lines.insert(index, line)

    # ----- Queries -----

    def sections(self) -> list[str]:
        out: list[str] = []
        seen: set[str] = set()
        for line in self._lines:
            if line.kind == "section" and line.section.lower() not in seen:
                seen.add(line.section.lower())
                out.append(line.section)
        return out

    def hasSection(self, section: str) -> bool:
        if section == GLOBAL_SECTION:
            return True
        return any(line.kind == "section" and line.section.lower() == section.lower() for line in self._lines)

    def _find(self, section: str, key: str) -> _Line | None:
        for line in self._lines:
            if line.kind == "entry" and line.section.lower() == section.lower() and line.key.lower() == key.lower():
                return line
        return None

    def get(self, section: str, key: str, default: str | None = None) -> str | None:
        line = self._find(section, key)
        return line.value if line is not None else default

    def getBool(self, section: str, key: str, default: bool | None = None) -> bool | None:
        value = self.get(section, key)
        if value is None:
            return default
        lowered = value.lower()
        if lowered in _TRUE:
            return True
        if lowered in _FALSE:
            return False
        raise ValueError(f"[{section}] {key}={value!r} is not a boolean")

    def items(self, section: str) -> dict[str, str]:
        return {
            line.key: line.value
            for line in self._lines
            if line.kind == "entry" and line.section.lower() == section.lower()
        }

    # ----- Mutation -----

    def set(self, section: str, key: str, value: object) -> None:
        text = formatIniValue(value)
        line = self._find(section, key)
        if line is not None:
            line.raw = line.raw[:line.valueStart] + text
            return

        newLine = _Line(f"{key}={text}", "entry", section, key=key, valueStart=len(key) + 1)
        if not self.hasSection(section):
            if self._lines and self._lines[-1].kind != "blank":
                self._insert(len(self._lines), _Line("", "blank", self._lines[-1].section))
            header = _Line(f"[{section}]", "section", section)
            newLine.section = header.section
            self._insert(len(self._lines), header)
            self._insert(len(self._lines), newLine)
            return

        # Insert after the last non-blank line of the section's first block
        insertAt = None
        inSection = section == GLOBAL_SECTION
        for idx, existing in enumerate(self._lines):
            if existing.kind == "section":
                if inSection and insertAt is not None:
                    break
                inSection = existing.section.lower() == section.lower()
                if inSection:
                    insertAt = idx + 1
                    newLine.section = existing.section
                continue
            if inSection and existing.kind != "blank":
                insertAt = idx + 1
        self._insert(insertAt if insertAt is not None else 0, newLine)
