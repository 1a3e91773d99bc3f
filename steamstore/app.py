"""Application details, genres and category listings."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Mapping, Optional, TypeVar

from steamstore.price import AppPrice
from steamstore.types import Platforms, ReleaseDate

_T = TypeVar("_T")


def _optional(
    data: Mapping[str, Any], key: str, factory: Callable[[Any], _T]
) -> Optional[_T]:
    value = data.get(key)
    return None if value is None else factory(value)


def _optional_list(
    data: Mapping[str, Any], key: str, factory: Callable[[Any], _T]
) -> Optional[list[_T]]:
    value = data.get(key)
    return None if value is None else [factory(item) for item in value]


def _number_from_string(value: Any) -> Optional[int]:
    """Accept an integer or a string holding one; an empty string means none."""
    if value is None:
        return None
    if isinstance(value, str):
        text = value.strip()
        return int(text) if text else None
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"expected a number or a numeric string, got {value!r}")
    return value


@dataclass
class ContentDescriptors:
    """Mature content descriptors of an application."""

    ids: list[int]
    notes: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> ContentDescriptors:
        return cls(ids=list(data["ids"]), notes=data.get("notes"))


@dataclass
class SupportInfo:
    """Where to get support for an application."""

    url: str
    email: str

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> SupportInfo:
        return cls(url=data["url"], email=data["email"])


@dataclass
class Achievement:
    """A highlighted achievement."""

    name: str
    path: str

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Achievement:
        return cls(name=data["name"], path=data["path"])


@dataclass
class Achievements:
    """Achievement count and highlighted achievements."""

    total: int
    highlighted: Optional[list[Achievement]] = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Achievements:
        return cls(
            total=data["total"],
            highlighted=_optional_list(data, "highlighted", Achievement.from_dict),
        )


@dataclass
class MovieFormat:
    """Video links at low and maximum resolution."""

    x480: str
    max: str

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> MovieFormat:
        return cls(x480=data["480"], max=data["max"])


@dataclass
class Movie:
    """A trailer or other video of an application."""

    id: int
    name: str
    thumbnail: str
    highlight: bool
    webm: MovieFormat
    mp4: MovieFormat

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Movie:
        return cls(
            id=data["id"],
            name=data["name"],
            thumbnail=data["thumbnail"],
            highlight=data["highlight"],
            webm=MovieFormat.from_dict(data["webm"]),
            mp4=MovieFormat.from_dict(data["mp4"]),
        )


@dataclass
class Screenshot:
    """A screenshot of an application."""

    id: int
    path_thumbnail: str
    path_full: str

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Screenshot:
        return cls(
            id=data["id"],
            path_thumbnail=data["path_thumbnail"],
            path_full=data["path_full"],
        )


@dataclass
class Metacritic:
    """Metacritic score and link."""

    score: int
    url: str

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Metacritic:
        return cls(score=data["score"], url=data["url"])


@dataclass
class Requirements:
    """System requirements as HTML fragments."""

    minimum: Optional[str] = None
    recommended: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Requirements:
        return cls(minimum=data.get("minimum"), recommended=data.get("recommended"))


def _requirements(value: Any) -> Optional[Requirements]:
    """An empty object stands for no requirements."""
    if value is None:
        return None
    if not isinstance(value, Mapping):
        raise TypeError(f"expected an object for requirements, got {value!r}")
    return Requirements.from_dict(value) if value else None


@dataclass
class Recommendations:
    """Number of user recommendations."""

    total: int

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Recommendations:
        return cls(total=data["total"])


@dataclass
class Category:
    """A store category of an application."""

    id: int
    description: str

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Category:
        return cls(id=data["id"], description=data["description"])


@dataclass
class Genre:
    """A store genre."""

    id: str
    name: Optional[str] = None
    description: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Genre:
        return cls(
            id=data["id"],
            name=data.get("name"),
            description=data.get("description"),
        )


@dataclass
class App:
    """An application id with its name."""

    app_id: int
    name: str

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> App:
        return cls(app_id=data["appid"], name=data["name"])


@dataclass
class TabItem:
    """An entry of a listing tab."""

    type: int
    app_id: int

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> TabItem:
        return cls(type=data["type"], app_id=data["id"])


@dataclass
class Tab:
    """A listing tab such as top sellers or specials."""

    name: str
    total_item_count: int
    items: list[TabItem]

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Tab:
        return cls(
            name=data["name"],
            total_item_count=data["total_item_count"],
            items=[TabItem.from_dict(item) for item in data["items"]],
        )


@dataclass
class AppsIn:
    """Applications of a genre or category, grouped in tabs."""

    status: int
    id: str
    name: str
    tabs: Optional[dict[str, Tab]] = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> AppsIn:
        tabs = data.get("tabs")
        return cls(
            status=data["status"],
            id=data["id"],
            name=data["name"],
            tabs=None
            if tabs is None
            else {key: Tab.from_dict(tab) for key, tab in tabs.items()},
        )


@dataclass
class AppDetails:
    """Detailed information about a store application."""

    type: str
    name: str
    app_id: int
    required_age: Optional[int] = None
    is_free: Optional[bool] = None
    controller_support: Optional[str] = None
    dlc: Optional[list[int]] = None
    detailed_description: Optional[str] = None
    about_the_game: Optional[str] = None
    short_description: Optional[str] = None
    supported_languages: Optional[str] = None
    header_image: Optional[str] = None
    capsule_image: Optional[str] = None
    capsule_imagev5: Optional[str] = None
    website: Optional[str] = None
    pc_requirements: Optional[Requirements] = None
    mac_requirements: Optional[Requirements] = None
    linux_requirements: Optional[Requirements] = None
    legal_notice: Optional[str] = None
    developers: Optional[list[str]] = None
    publishers: Optional[list[str]] = None
    price_overview: Optional[AppPrice] = None
    packages: Optional[list[int]] = None
    platforms: Optional[Platforms] = None
    metacritic: Optional[Metacritic] = None
    categories: Optional[list[Category]] = None
    genres: Optional[list[Genre]] = None
    screenshots: Optional[list[Screenshot]] = None
    movies: Optional[list[Movie]] = None
    recommendations: Optional[Recommendations] = None
    achievements: Optional[Achievements] = None
    release_date: Optional[ReleaseDate] = None
    support_info: Optional[SupportInfo] = None
    background: Optional[str] = None
    background_raw: Optional[str] = None
    content_descriptors: Optional[ContentDescriptors] = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> AppDetails:
        same = lambda value: value  # noqa: E731
        return cls(
            type=data["type"],
            name=data["name"],
            app_id=data["steam_appid"],
            required_age=_number_from_string(data.get("required_age")),
            is_free=data.get("is_free"),
            controller_support=data.get("controller_support"),
            dlc=_optional_list(data, "dlc", same),
            detailed_description=data.get("detailed_description"),
            about_the_game=data.get("about_the_game"),
            short_description=data.get("short_description"),
            supported_languages=data.get("supported_languages"),
            header_image=data.get("header_image"),
            capsule_image=data.get("capsule_image"),
            capsule_imagev5=data.get("capsule_imagev5"),
            website=data.get("website"),
            pc_requirements=_requirements(data.get("pc_requirements")),
            mac_requirements=_requirements(data.get("mac_requirements")),
            linux_requirements=_requirements(data.get("linux_requirements")),
            legal_notice=data.get("legal_notice"),
            developers=_optional_list(data, "developers", same),
            publishers=_optional_list(data, "publishers", same),
            price_overview=_optional(data, "price_overview", AppPrice.from_dict),
            packages=_optional_list(data, "packages", same),
            platforms=_optional(data, "platforms", Platforms.from_dict),
            metacritic=_optional(data, "metacritic", Metacritic.from_dict),
            categories=_optional_list(data, "categories", Category.from_dict),
            genres=_optional_list(data, "genres", Genre.from_dict),
            screenshots=_optional_list(data, "screenshots", Screenshot.from_dict),
            movies=_optional_list(data, "movies", Movie.from_dict),
            recommendations=_optional(data, "recommendations", Recommendations.from_dict),
            achievements=_optional(data, "achievements", Achievements.from_dict),
            release_date=_optional(data, "release_date", ReleaseDate.from_dict),
            support_info=_optional(data, "support_info", SupportInfo.from_dict),
            background=data.get("background"),
            background_raw=data.get("background_raw"),
            content_descriptors=_optional(
                data, "content_descriptors", ContentDescriptors.from_dict
            ),
        )