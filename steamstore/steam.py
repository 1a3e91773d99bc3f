"""Asynchronous client for the store's web API."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any, Callable, NamedTuple, Optional, TypeVar
from urllib.parse import urlencode, urljoin, urlsplit

import httpx

from steamstore.app import AppDetails, AppsIn, Genre
from steamstore.package import DlcData, PackageDetails
from steamstore.price import AppPrice, Featured, FeaturedCategory
from steamstore.review import Reviews, ReviewsFilter
from steamstore.types import Language

DEFAULT_STORE_URL = "https://store.steampowered.com"

_MAX_ID = 2**64 - 1

# ISO 3166-1 alpha-2 country codes.
_COUNTRY_CODES = frozenset(
    """
    AD AE AF AG AI AL AM AO AQ AR AS AT AU AW AX AZ
    BA BB BD BE BF BG BH BI BJ BL BM BN BO BQ BR BS BT BV BW BY BZ
    CA CC CD CF CG CH CI CK CL CM CN CO CR CU CV CW CX CY CZ
    DE DJ DK DM DO DZ
    EC EE EG EH ER ES ET
    FI FJ FK FM FO FR
    GA GB GD GE GF GG GH GI GL GM GN GP GQ GR GS GT GU GW GY
    HK HM HN HR HT HU
    ID IE IL IM IN IO IQ IR IS IT
    JE JM JO JP
    KE KG KH KI KM KN KP KR KW KY KZ
    LA LB LC LI LK LR LS LT LU LV LY
    MA MC MD ME MF MG MH MK ML MM MN MO MP MQ MR MS MT MU MV MW MX MY MZ
    NA NC NE NF NG NI NL NO NP NR NU NZ
    OM
    PA PE PF PG PH PK PL PM PN PR PS PT PW PY
    QA
    RE RO RS RU RW
    SA SB SC SD SE SG SH SI SJ SK SL SM SN SO SR SS ST SV SX SY SZ
    TC TD TF TG TH TJ TK TL TM TN TO TR TT TV TW TZ
    UA UG UM US UY UZ
    VA VC VE VG VI VN VU
    WF WS
    YE YT
    ZA ZM ZW
    """.split()
)

_T = TypeVar("_T")


class SteamError(Exception):
    """Base class of the store client's errors."""


class ResponseWithNoDataError(SteamError):
    """The response carried no data, possibly because of a rate limit."""

    def __init__(self) -> None:
        super().__init__("response with no data; this could be due to a rate limit")


class ResponseWithNoSuccessError(SteamError):
    """The response reported failure."""

    def __init__(self) -> None:
        super().__init__("response with no success")


class IdNotFoundError(SteamError):
    """The requested id is missing from the response."""

    def __init__(self, id: str) -> None:
        super().__init__(f"id {id} was not found in response")
        self.id = id


class IncorrectCountryCodeError(SteamError):
    """The country code is not an ISO 3166-1 alpha-2 code."""

    def __init__(self) -> None:
        super().__init__("failed to parse country from country code")


class RequestError(SteamError):
    """Sending the request or decoding its response failed."""


class UrlError(SteamError):
    """A store URL could not be parsed or joined."""


class ParseIdError(SteamError):
    """An id in the response is not an unsigned integer."""

    def __init__(self, value: str) -> None:
        super().__init__(f"failed to parse id: {value!r}")
        self.value = value


class _Entry(NamedTuple):
    success: bool
    data: Any


def _id_entries(
    payload: Mapping[str, Any], parse_data: Callable[[Any], _T]
) -> dict[str, _Entry]:
    entries = {}
    for key, entry in payload.items():
        data = entry.get("data")
        entries[key] = _Entry(
            success=entry["success"],
            data=None if data is None else parse_data(data),
        )
    return entries


def _parse_id(key: str) -> int:
    if not (key.isascii() and key.isdigit()) or int(key) > _MAX_ID:
        raise ParseIdError(key)
    return int(key)


def _check_url(url: str) -> str:
    try:
        parts = urlsplit(url)
    except ValueError as exc:
        raise UrlError(str(exc)) from exc
    if not parts.scheme or not parts.netloc:
        raise UrlError(f"not an absolute URL: {url!r}")
    return url


class SteamBuilder:
    """Collects settings and builds a :class:`Steam` client."""

    def __init__(self) -> None:
        self._language: Optional[Language] = None
        self._country_code: Optional[str] = None
        self._store_url = DEFAULT_STORE_URL

    def with_country_code(self, country_code: str) -> SteamBuilder:
        """Set the ISO 3166-1 alpha-2 country used for prices."""
        self._country_code = country_code.upper()
        return self

    def with_language(self, language: Language | str) -> SteamBuilder:
        """Set the language of localized strings."""
        self._language = Language(language)
        return self

    def with_store_url(self, url: str) -> SteamBuilder:
        """Use another base URL for the store."""
        self._store_url = _check_url(url)
        return self

    def build(self, transport: Optional[httpx.AsyncBaseTransport] = None) -> Steam:
        """Validate the settings and return a client."""
        if self._country_code is not None and self._country_code not in _COUNTRY_CODES:
            raise IncorrectCountryCodeError()
        return Steam(
            httpx.AsyncClient(transport=transport),
            language=self._language,
            country_code=self._country_code,
            store_url=self._store_url,
        )


class Steam:
    """Client for the store's web API."""

    def __init__(
        self,
        client: httpx.AsyncClient,
        *,
        language: Optional[Language] = None,
        country_code: Optional[str] = None,
        store_url: str = DEFAULT_STORE_URL,
    ) -> None:
        self._client = client
        self._language = language
        self._country_code = country_code
        self._store_url = store_url

    @classmethod
    def builder(cls) -> SteamBuilder:
        return SteamBuilder()

    async def aclose(self) -> None:
        """Close the underlying HTTP client."""
        await self._client.aclose()

    async def __aenter__(self) -> Steam:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()

    def _url(self, path: str, params: Iterable[tuple[str, str]] = ()) -> str:
        try:
            url = urljoin(self._store_url, path)
        except ValueError as exc:
            raise UrlError(str(exc)) from exc
        pairs = list(params)
        if self._language is not None:
            pairs.append(("l", self._language.value))
        if self._country_code is not None:
            pairs.append(("cc", self._country_code))
        if pairs:
            url = f"{url}?{urlencode(pairs, safe='*')}"
        return url

    async def _fetch(
        self,
        path: str,
        params: Iterable[tuple[str, str]],
        parse: Callable[[Any], _T],
    ) -> _T:
        url = self._url(path, params)
        try:
            response = await self._client.get(url)
            payload = response.json()
        except httpx.HTTPError as exc:
            raise RequestError(str(exc) or type(exc).__name__) from exc
        except ValueError as exc:
            raise RequestError(f"error decoding response body: {exc}") from exc
        try:
            return parse(payload)
        except (KeyError, TypeError, ValueError, AttributeError) as exc:
            raise RequestError(f"error decoding response body: {exc!r}") from exc

    async def featured(self) -> Featured:
        """Featured applications per platform."""
        data = await self._fetch("api/featured/", (), Featured.from_dict)
        if data.status != 1:
            raise ResponseWithNoSuccessError()
        return data

    async def genres(self) -> list[Genre]:
        """List of store genres."""

        def parse(payload: Mapping[str, Any]) -> tuple[int, list[Genre]]:
            return payload["status"], [Genre.from_dict(g) for g in payload["genres"]]

        status, genres = await self._fetch("api/getgenrelist/", (), parse)
        if status != 1:
            raise ResponseWithNoSuccessError()
        return genres

    async def apps_in_genre(self, genre: str) -> AppsIn:
        """Applications of a genre such as ``action``, grouped in tabs."""
        data = await self._fetch(
            "api/getappsingenre/", [("genre", genre)], AppsIn.from_dict
        )
        if data.status != 1:
            raise ResponseWithNoSuccessError()
        return data

    async def apps_in_category(self, category: str) -> AppsIn:
        """Applications of a category such as ``cat_newreleases``, grouped in tabs."""
        data = await self._fetch(
            "api/getappsincategory/", [("category", category)], AppsIn.from_dict
        )
        if data.status != 1:
            raise ResponseWithNoSuccessError()
        return data

    async def featured_categories(self) -> dict[str, FeaturedCategory]:
        """Featured categories with prices, such as specials or top sellers."""

        def parse(payload: Mapping[str, Any]) -> tuple[int, dict[str, FeaturedCategory]]:
            categories = {
                key: FeaturedCategory.from_dict(value)
                for key, value in payload.items()
                if key != "status"
            }
            return payload["status"], categories

        status, categories = await self._fetch("api/featuredcategories/", (), parse)
        if status != 1:
            raise ResponseWithNoSuccessError()
        return categories

    async def package(self, pkg_id: int) -> PackageDetails:
        """Details of a package (not a bundle)."""
        key = str(pkg_id)
        entries = await self._fetch(
            "api/packagedetails/",
            [("packageids", key)],
            lambda payload: _id_entries(payload, PackageDetails.from_dict),
        )
        entry = entries.get(key)
        if entry is None:
            raise IdNotFoundError(key)
        if not entry.success:
            raise ResponseWithNoSuccessError()
        if entry.data is None:
            raise ResponseWithNoDataError()
        entry.data.pkg_id = pkg_id
        return entry.data

    async def reviews(self, app_id: int, review_filter: ReviewsFilter) -> Reviews:
        """One page of reviews for an application."""
        data = await self._fetch(
            f"appreviews/{app_id}", review_filter.to_url_params(), Reviews.from_dict
        )
        if data.success != 1:
            raise ResponseWithNoSuccessError()
        return data

    async def dlc(self, app_id: int) -> DlcData:
        """Downloadable content of an application."""
        data = await self._fetch(
            "api/dlcforapp/", [("appid", str(app_id))], DlcData.from_dict
        )
        if data.status != 1:
            raise ResponseWithNoSuccessError()
        if data.dlc is None:
            raise ResponseWithNoDataError()
        return data

    async def app(self, app_id: int) -> AppDetails:
        """Detailed information about an application."""
        key = str(app_id)
        entries = await self._fetch(
            "api/appdetails/",
            [("appids", key)],
            lambda payload: _id_entries(payload, AppDetails.from_dict),
        )
        entry = entries.get(key)
        if entry is None:
            raise IdNotFoundError(key)
        if not entry.success:
            raise ResponseWithNoSuccessError()
        if entry.data is None:
            raise ResponseWithNoDataError()
        return entry.data

    async def price(self, app_ids: Iterable[int]) -> list[AppPrice]:
        """Price overviews of several applications; failed entries are skipped."""
        ids = ",".join(str(app_id) for app_id in app_ids)
        entries = await self._fetch(
            "api/appdetails/",
            [("appids", ids), ("filters", "price_overview")],
            lambda payload: _id_entries(
                payload, lambda data: AppPrice.from_dict(data["price_overview"])
            ),
        )
        prices = []
        for key, entry in entries.items():
            if entry.success and entry.data is not None:
                entry.data.app_id = _parse_id(key)
                prices.append(entry.data)
        return prices