"""A small INI document model with a forgiving parser."""

from __future__ import annotations

import os
import re
from collections.abc import Iterator

_LINE_BREAKS = re.compile(r"[\r\n]+")
_BLANKS = " \t\r\n\0"
_INT_PREFIX = re.compile(r"\s*([+-]?\d+)")
_FLOAT_PREFIX = re.compile(
    r"\s*([+-]?(?:\d+\.?\d*(?:[eE][+-]?\d+)?|\.\d+(?:[eE][+-]?\d+)?|inf(?:inity)?|nan))",
    re.IGNORECASE,
)


def _trim(text: str) -> str:
    return text.strip(_BLANKS)


def _blank(text: str) -> bool:
    return all(ch in _BLANKS for ch in text)


class Section:
    """A named set of key/value strings, iterated in key order."""

    def __init__(self, name: str) -> None:
        self._name = name
        self._values: dict[str, str] = {}

    @property
    def name(self) -> str:
        return self._name

    def __getitem__(self, key: str) -> str:
        if not key:
            raise ValueError("key cannot be an empty string.")
        return self._values[key]

    def __setitem__(self, key: str, value: str) -> None:
        self.set_value(key, value)

    def __contains__(self, key) -> bool:
        return bool(key) and key in self._values

    def __len__(self) -> int:
        return len(self._values)

    def __iter__(self) -> Iterator[str]:
        return iter(self.keys())

    def __str__(self) -> str:
        if not self._values:
            return ""
        lines = [f"[{self._name}]"]
        lines.extend(f"{key}={value}" for key, value in self.items())
        return "\r\n".join(lines)

    def __repr__(self) -> str:
        return f"Section({self._name!r}, {dict(self.items())!r})"

    def get_value(self, key: str) -> str:
        """The value for ``key``, or an empty string if there is none."""
        if not key:
            return ""
        return self._values.get(key, "")

    def get_int(self, key: str) -> int:
        """The leading decimal integer of the value, or 0."""
        match = _INT_PREFIX.match(self.get_value(key))
        return int(match.group(1)) if match else 0

    def get_float(self, key: str) -> float:
        """The leading floating-point number of the value, or 0.0."""
        match = _FLOAT_PREFIX.match(self.get_value(key))
        return float(match.group(1)) if match else 0.0

    def set_value(self, key: str, value: str) -> None:
        if not key:
            raise ValueError("key cannot be an empty string.")
        self._values[key] = value

    def remove_value(self, key: str) -> bool:
        """Remove ``key``; return whether it was present."""
        if not key:
            return False
        return self._values.pop(key, None) is not None

    def keys(self) -> list[str]:
        return sorted(self._values)

    def items(self) -> list[tuple[str, str]]:
        return sorted(self._values.items())


class Ini:
    """An INI document: sections of key/value pairs, iterated by name."""

    def __init__(self, config: str = "") -> None:
        self._sections: dict[str, Section] = {}
        if config:
            self._parse(config)

    def _parse(self, config: str) -> None:
        section_key = ""
        section: Section | None = None
        for line in _LINE_BREAKS.split(config.strip("\0")):
            if not line:
                continue
            hash_index = line.find("#")
            if hash_index == 0:
                continue
            if hash_index > 0:
                line = line[:hash_index]

            left = line.find("[")
            right = line.find("]", left) if left >= 0 else -1
            if (
                left >= 0
                and right - left - 1 >= 1
                and _blank(line[:left])
                and _blank(line[right + 1:])
            ):
                section_key = _trim(line[left + 1:right])
                if section_key:
                    section = self.add(section_key) or self.get(section_key)

            if not section_key or section is None:
                continue
            index = line.find("=")
            if index < 0:
                index = line.find(":")
                if index < 0:
                    continue
            if index == 0:
                continue
            key = _trim(line[:index])
            if key:
                section.set_value(key, _trim(line[index + 1:]))

    def __getitem__(self, section: str) -> Section:
        """The named section, added if it does not exist yet."""
        if not section:
            raise ValueError("section cannot be an empty string.")
        found = self.get(section)
        if found is not None:
            return found
        return self.add(section)

    def __contains__(self, section) -> bool:
        return self.get(section) is not None

    def __len__(self) -> int:
        return len(self._sections)

    def __iter__(self) -> Iterator[str]:
        return iter(self.keys())

    def __str__(self) -> str:
        rendered = (str(section) for _, section in self.items())
        return "\r\n\r\n".join(text for text in rendered if text)

    def __repr__(self) -> str:
        return f"Ini({self.keys()!r})"

    def get(self, section: str) -> Section | None:
        if not section:
            return None
        return self._sections.get(section)

    def add(self, section: str) -> Section | None:
        """Add a new empty section; return None if it exists or the name is empty."""
        if not section or section in self._sections:
            return None
        created = Section(section)
        self._sections[section] = created
        return created

    def remove(self, section: str) -> bool:
        if not section:
            return False
        return self._sections.pop(section, None) is not None

    def keys(self) -> list[str]:
        return sorted(self._sections)

    def items(self) -> list[tuple[str, Section]]:
        return sorted(self._sections.items(), key=lambda pair: pair[0])

    @classmethod
    def load_file(cls, path) -> "Ini":
        """Parse a file; an empty path or unreadable file gives an empty document."""
        if not path:
            return cls()
        try:
            with open(os.fspath(path), "rb") as stream:
                raw = stream.read()
        except OSError:
            return cls()
        if not raw:
            return cls()
        return cls(raw.decode("utf-8", errors="surrogateescape"))

    @classmethod
    def load_from(cls, config: str) -> "Ini":
        return cls(config or "")