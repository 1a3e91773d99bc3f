# steamstore

An asynchronous client for the unofficial Steam Storefront API, built on
`httpx`. It fetches product information from the Steam store and returns
plain Python dataclasses:

- application details (`Steam.app`), DLC lists (`Steam.dlc`) and package
  details (`Steam.package`)
- price overviews for many applications in one request (`Steam.price`)
- the featured page (`Steam.featured`) and featured categories
  (`Steam.featured_categories`: specials, top sellers, ...)
- the genre list (`Steam.genres`) and the applications in a genre or category
  (`Steam.apps_in_genre`, `Steam.apps_in_category`)
- user reviews with filters and cursor-based paging (`Steam.reviews`)

## Installation

```
pip install steamstore
```

For running the test suite:

```
pip install "steamstore[test]"
```

## Modules

| Module               | Contents                                                         |
|----------------------|------------------------------------------------------------------|
| `steamstore.steam`   | `SteamBuilder`, the `Steam` client and the error classes         |
| `steamstore.types`   | `Language`, `Platforms`, `ReleaseDate`                           |
| `steamstore.app`     | `AppDetails`, `Genre`, `AppsIn`, `Tab`, `TabItem` and the parts of an application |
| `steamstore.package` | `PackageDetails`, `PackageApp`, `Controller`, `DlcData`, `DlcDetails` |
| `steamstore.price`   | `Price`, `AppPrice`, `PackagePrice`, `Featured`, `FeaturedCategory`, `FeaturedItem` |
| `steamstore.review`  | `ReviewsFilter`, `Filter`, `ReviewType`, `PurchaseType`, `OfftopicActivity`, `Reviews`, `Review`, `Author`, `QuerySummary` |
| `steamstore.cli`     | the `steamstore` command                                         |

Every response type has a `from_dict` class method that builds it from the
decoded JSON of the store.

## Creating a client

A client is made with `SteamBuilder`. The country code is an ISO 3166-1
alpha-2 code (upper-cased for you) and decides the currency of the prices;
the language decides which localized strings come back. Both are sent with
every request as the `cc` and `l` query parameters. An unknown country code
makes `build()` raise `IncorrectCountryCodeError`.

```python
from steamstore.steam import SteamBuilder
from steamstore.types import Language

client = (
    SteamBuilder()
    .with_country_code("US")
    .with_language(Language.ENGLISH)
    .build()
)
```

`Steam.builder()` returns the same builder. `with_language()` also accepts the
language's string value, such as `"english"`. `with_store_url()` points the
client at another absolute store address and raises `UrlError` for anything
else. `build()` takes an optional `httpx` async transport, which is handy for
testing with `httpx.MockTransport`.

All requests are coroutines. Close the client with `await client.aclose()`,
or use it as an async context manager:

```python
async with SteamBuilder().with_country_code("US").build() as client:
    app = await client.app(219990)
```

## Applications, DLC and packages

```python
import asyncio

async def main():
    async with SteamBuilder().with_country_code("US").build() as client:
        app = await client.app(219990)
        print(app.app_id, app.name)

        dlc_list = await client.dlc(219990)
        for dlc in dlc_list.dlc:
            print(dlc.dlc_id, dlc.name)

        for pkg_id in app.packages or []:
            pkg = await client.package(pkg_id)
            print(pkg.pkg_id, pkg.name, pkg.price.price.discount_percent)

asyncio.run(main())
```

`AppDetails.required_age` accepts either a number or a numeric string from the
store; empty requirement objects become `None`.

## Prices and featured items

```python
prices = await client.price([483840, 565610, 642280])
for price in prices:
    print(price.app_id, price.initial_formatted, price.final_formatted)

featured = await client.featured()
for item in featured.featured_linux:
    if item.discounted:
        print(item.app_id, item.name, item.discount_percent)

categories = await client.featured_categories()
specials = categories.get("specials")
```

`price()` skips applications for which the store reports no success or no
price, so the returned list may be shorter than the list of ids.

## Reviews

Reviews come in pages. Pass the cursor of one response in the filter to get
the next page.

```python
from steamstore.review import OfftopicActivity, ReviewsFilter

review_filter = ReviewsFilter(
    language=Language.ENGLISH,
    day_range=365,
    num_per_page=100,
    offtopic_activity=OfftopicActivity.INCLUDE,
)

while True:
    page = await client.reviews(489830, review_filter)
    for review in page.reviews:
        print(review.votes_funny, review.review)
    if page.query_summary.num_reviews < 100:
        break
    review_filter.cursor = page.cursor
```

`ReviewsFilter.to_url_params()` returns the query parameters the filter
produces. `day_range` is sent as at least 365 and `num_per_page` as at least
100; `OfftopicActivity.INCLUDE` adds `filter_offtopic_activity=0`.

## Errors

Every failure raises a subclass of `SteamError` (from `steamstore.steam`):

| Exception                     | Raised when                                          |
|-------------------------------|------------------------------------------------------|
| `ResponseWithNoSuccessError`  | the store reports the request as unsuccessful        |
| `ResponseWithNoDataError`     | the response holds no data (often a rate limit)      |
| `IdNotFoundError`             | the requested id is missing from the response        |
| `IncorrectCountryCodeError`   | the country code is not a known ISO 3166-1 code      |
| `RequestError`                | the HTTP request failed, or the body is not JSON of the expected shape |
| `UrlError`                    | a store URL could not be parsed or joined            |
| `ParseIdError`                | an application id in a price response is not an unsigned integer |

The client does not retry requests or wait out rate limits; that is left to
the caller.

## Command line

The package installs a `steamstore` command with three subcommands:

```
steamstore app [APP_ID]                      # details, DLC, packages and price (default 219990)
steamstore pricing [APP_ID ...]              # discounted featured items and prices of the given apps
steamstore reviews [APP_ID] [--min-funny N]  # past year's reviews voted funny more than N times (default 100)
```

Global options, given before the subcommand: `--country` (default `US`),
`--language` (a language value such as `english`, the default) and
`--store-url`. Errors are printed to standard error and the command exits
with status 1. See all options with:

```
steamstore --help
```