"""Packages and downloadable content of store applications."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Optional

from steamstore.price import PackagePrice, Price
from steamstore.types import Platforms, ReleaseDate


@dataclass
class PackageApp:
    """An application contained in a package."""

    app_id: int
    name: str

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> PackageApp:
        return cls(app_id=data["id"], name=data["name"])


@dataclass
class Controller:
    """Controller support of a package."""

    full_gamepad: bool

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Controller:
        return cls(full_gamepad=data["full_gamepad"])


@dataclass
class PackageDetails:
    """Details of a package."""

    name: str
    page_image: str
    small_logo: str
    apps: list[PackageApp]
    price: PackagePrice
    platforms: Platforms
    controller: Controller
    release_date: ReleaseDate
    pkg_id: int = 0

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> PackageDetails:
        return cls(
            name=data["name"],
            page_image=data["page_image"],
            small_logo=data["small_logo"],
            apps=[PackageApp.from_dict(app) for app in data["apps"]],
            price=PackagePrice.from_dict(data["price"]),
            platforms=Platforms.from_dict(data["platforms"]),
            controller=Controller.from_dict(data["controller"]),
            release_date=ReleaseDate.from_dict(data["release_date"]),
        )


@dataclass
class DlcDetails:
    """A single downloadable content item."""

    dlc_id: int
    name: str
    header_image: str
    price_overview: Price
    platforms: Platforms
    release_date: ReleaseDate
    controller_support: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> DlcDetails:
        return cls(
            dlc_id=data["id"],
            name=data["name"],
            header_image=data["header_image"],
            price_overview=Price.from_dict(data["price_overview"]),
            platforms=Platforms.from_dict(data["platforms"]),
            release_date=ReleaseDate.from_dict(data["release_date"]),
            controller_support=data.get("controller_support"),
        )


@dataclass
class DlcData:
    """Downloadable content available for an application."""

    status: int
    app_id: str
    name: str
    dlc: Optional[list[DlcDetails]] = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> DlcData:
        dlc = data.get("dlc")
        return cls(
            status=data["status"],
            app_id=data["appid"],
            name=data["name"],
            dlc=None if dlc is None else [DlcDetails.from_dict(item) for item in dlc],
        )