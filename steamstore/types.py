"""Shared store types: languages, platforms and release dates."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Mapping, Optional


class Language(str, Enum):
    """Languages the store accepts for localized strings."""

    ALL = "all"
    ARABIC = "arabic"
    BULGARIAN = "bulgarian"
    SCHINESE = "schinese"
    TCHINESE = "tchinese"
    CZECH = "czech"
    DANISH = "danish"
    DUTCH = "dutch"
    ENGLISH = "english"
    FINNISH = "finnish"
    FRENCH = "french"
    GERMAN = "german"
    GREEK = "greek"
    HUNGARIAN = "hungarian"
    INDONESIAN = "indonesian"
    ITALIAN = "italian"
    JAPANESE = "japanese"
    KOREANA = "koreana"
    NORWEGIAN = "norwegian"
    POLISH = "polish"
    PORTUGUESE = "portuguese"
    BRAZILIAN = "brazilian"
    ROMANIAN = "romanian"
    RUSSIAN = "russian"
    SPANISH = "spanish"
    LATAM = "latam"
    SWEDISH = "swedish"
    THAI = "thai"
    TURKISH = "turkish"
    UKRAINIAN = "ukrainian"
    VIETNAMESE = "vietnamese"

    def __str__(self) -> str:
        return self.value


@dataclass
class Platforms:
    """Operating systems a product is available on."""

    windows: bool
    mac: bool
    linux: bool

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Platforms:
        return cls(
            windows=data["windows"],
            mac=data["mac"],
            linux=data["linux"],
        )


@dataclass
class ReleaseDate:
    """Release information of a product."""

    coming_soon: Optional[bool] = None
    date: Optional[str] = None
    steam: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> ReleaseDate:
        return cls(
            coming_soon=data.get("coming_soon"),
            date=data.get("date"),
            steam=data.get("steam"),
        )