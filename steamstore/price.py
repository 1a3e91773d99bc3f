"""Prices, discounts and featured items of the store."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Optional


@dataclass
class Price:
    """A price with its currency and discount."""

    currency: str
    initial: int
    final: int
    discount_percent: int

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Price:
        return cls(
            currency=data["currency"],
            initial=data["initial"],
            final=data["final"],
            discount_percent=data["discount_percent"],
        )


@dataclass
class AppPrice:
    """Price of an application with its formatted strings."""

    final_formatted: str
    initial_formatted: str
    price: Price
    app_id: int = 0

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> AppPrice:
        return cls(
            final_formatted=data["final_formatted"],
            initial_formatted=data["initial_formatted"],
            price=Price.from_dict(data),
        )


@dataclass
class PackagePrice:
    """Price of a package and the sum of its items bought one by one."""

    individual: int
    price: Price

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> PackagePrice:
        return cls(individual=data["individual"], price=Price.from_dict(data))


@dataclass
class FeaturedItem:
    """An application shown on a featured page."""

    app_id: int
    type: int
    name: str
    discounted: bool
    discount_percent: int
    final_price: int
    currency: str
    large_capsule_image: str
    small_capsule_image: str
    windows_available: bool
    mac_available: bool
    linux_available: bool
    streamingvideo_available: bool
    header_image: str
    original_price: Optional[int] = None
    discount_expiration: Optional[int] = None
    controller_support: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> FeaturedItem:
        return cls(
            app_id=data["id"],
            type=data["type"],
            name=data["name"],
            discounted=data["discounted"],
            discount_percent=data["discount_percent"],
            final_price=data["final_price"],
            currency=data["currency"],
            large_capsule_image=data["large_capsule_image"],
            small_capsule_image=data["small_capsule_image"],
            windows_available=data["windows_available"],
            mac_available=data["mac_available"],
            linux_available=data["linux_available"],
            streamingvideo_available=data["streamingvideo_available"],
            header_image=data["header_image"],
            original_price=data.get("original_price"),
            discount_expiration=data.get("discount_expiration"),
            controller_support=data.get("controller_support"),
        )


@dataclass
class FeaturedCategory:
    """A featured category such as specials or top sellers."""

    id: str
    name: str
    items: Optional[list[FeaturedItem]] = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> FeaturedCategory:
        items = data.get("items")
        return cls(
            id=data["id"],
            name=data["name"],
            items=None if items is None else [FeaturedItem.from_dict(i) for i in items],
        )


@dataclass
class Featured:
    """Featured applications per platform."""

    featured_win: list[FeaturedItem]
    featured_mac: list[FeaturedItem]
    featured_linux: list[FeaturedItem]
    status: int

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Featured:
        def items(key: str) -> list[FeaturedItem]:
            return [FeaturedItem.from_dict(item) for item in data[key]]

        return cls(
            featured_win=items("featured_win"),
            featured_mac=items("featured_mac"),
            featured_linux=items("featured_linux"),
            status=data["status"],
        )