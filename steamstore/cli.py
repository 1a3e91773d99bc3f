"""Command line views of store details, prices and reviews."""

from __future__ import annotations

import argparse
import asyncio
import sys
from collections.abc import Iterable
from typing import Optional, Sequence

from steamstore.review import (
    MAX_REVIEW_NUM_PER_PAGE,
    OfftopicActivity,
    ReviewsFilter,
)
from steamstore.steam import Steam, SteamError
from steamstore.types import Language

DEFAULT_APP_ID = 219990
DEFAULT_REVIEWS_APP_ID = 489830
DEFAULT_PRICING_APP_IDS = (483840, 565610, 642280, 897670, 1088290, 1250890)
DEFAULT_MIN_FUNNY = 100


async def show_app(client: Steam, app_id: int) -> list[str]:
    """Return lines describing an application, its DLC, packages and price."""
    app = await client.app(app_id)
    lines = ["App details:", f"{app.app_id} - {app.name}"]

    dlc_list = await client.dlc(app_id)
    if dlc_list.dlc is not None:
        lines += ["", "DLC list:"]
        lines += [f"{dlc.dlc_id} - {dlc.name}" for dlc in dlc_list.dlc]

    if app.packages is not None:
        lines += ["", "Package list:"]
        for pkg_id in app.packages:
            pkg = await client.package(pkg_id)
            lines.append(
                f"{pkg.pkg_id} - {pkg.name} - discount {pkg.price.price.discount_percent}%"
            )

    prices = await client.price([app.app_id])
    lines += ["", "Price overview:"]
    lines += [
        f"{price.initial_formatted} with discount "
        f"{price.price.discount_percent}% = {price.final_formatted}"
        for price in prices
    ]
    return lines


async def show_pricing(client: Steam, app_ids: Iterable[int]) -> list[str]:
    """Return lines listing discounted featured items and prices of some apps."""
    featured = await client.featured()
    lines = ["Featured:"]
    lines += [
        f"{item.app_id} - {item.name} - {item.discount_percent}%"
        for item in featured.featured_linux
        if item.discounted
    ]

    categories = await client.featured_categories()
    specials = categories.get("specials")
    if specials is not None and specials.items is not None:
        lines += ["", "Featured specials:"]
        lines += [
            f"{item.app_id} - {item.name} - {item.discount_percent}%"
            for item in specials.items
            if item.discounted
        ]

    prices = await client.price(app_ids)
    lines += ["", "Price by app id:"]
    lines += [
        f"{price.app_id} - {price.price.discount_percent}% - {price.final_formatted}"
        for price in prices
    ]
    return lines


async def show_funny_reviews(client: Steam, app_id: int, min_funny: int) -> list[str]:
    """Return reviews of the past year voted funny more than ``min_funny`` times."""
    review_filter = ReviewsFilter(
        language=Language.ENGLISH,
        day_range=365,
        num_per_page=MAX_REVIEW_NUM_PER_PAGE,
        offtopic_activity=OfftopicActivity.INCLUDE,
    )
    lines: list[str] = []
    while True:
        page = await client.reviews(app_id, review_filter)
        for review in page.reviews:
            if review.votes_funny > min_funny:
                lines += [
                    f"Votes funny: {review.votes_funny}",
                    f"Review: {review.review}",
                    "",
                ]
        if page.query_summary.num_reviews < MAX_REVIEW_NUM_PER_PAGE:
            break
        review_filter.cursor = page.cursor
    return lines


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="steamstore", description=__doc__)
    parser.add_argument("--country", default="US", help="two-letter country code")
    parser.add_argument(
        "--language",
        type=Language,
        default=Language.ENGLISH,
        metavar="LANGUAGE",
        help="language of localized strings",
    )
    parser.add_argument("--store-url", help="base URL of the store")
    commands = parser.add_subparsers(dest="command", required=True)

    app = commands.add_parser("app", help="application details")
    app.add_argument("app_id", type=int, nargs="?", default=DEFAULT_APP_ID)

    pricing = commands.add_parser("pricing", help="discounts and prices")
    pricing.add_argument(
        "app_ids", type=int, nargs="*", default=list(DEFAULT_PRICING_APP_IDS)
    )

    reviews = commands.add_parser("reviews", help="funny reviews")
    reviews.add_argument("app_id", type=int, nargs="?", default=DEFAULT_REVIEWS_APP_ID)
    reviews.add_argument("--min-funny", type=int, default=DEFAULT_MIN_FUNNY)
    return parser


async def _run(args: argparse.Namespace) -> list[str]:
    builder = Steam.builder().with_country_code(args.country).with_language(args.language)
    if args.store_url:
        builder = builder.with_store_url(args.store_url)
    async with builder.build() as client:
        if args.command == "app":
            return await show_app(client, args.app_id)
        if args.command == "pricing":
            return await show_pricing(client, args.app_ids)
        return await show_funny_reviews(client, args.app_id, args.min_funny)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the command line and return its exit status."""
    args = _build_parser().parse_args(argv)
    try:
        lines = asyncio.run(_run(args))
    except SteamError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    print("\n".join(lines))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())