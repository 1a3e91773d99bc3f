import httpx
import pytest

from steamstore.review import OfftopicActivity, ReviewsFilter
from steamstore.steam import (
    IdNotFoundError,
    IncorrectCountryCodeError,
    ParseIdError,
    RequestError,
    ResponseWithNoDataError,
    ResponseWithNoSuccessError,
    Steam,
    SteamBuilder,
    UrlError,
)
from steamstore.types import Language


class Recorder:
    def __init__(self, routes):
        self.routes = routes
        self.requests = []

    def __call__(self, request):
        self.requests.append(request)
        payload = self.routes[request.url.path]
        if callable(payload):
            return payload(request)
        return httpx.Response(200, json=payload)


def make_client(routes, builder=None):
    recorder = Recorder(routes)
    client = (builder or Steam.builder()).build(transport=httpx.MockTransport(recorder))
    return client, recorder


def featured_item(app_id, discounted=True):
    return {
        "id": app_id,
        "type": 0,
        "name": f"Game {app_id}",
        "discounted": discounted,
        "discount_percent": 50 if discounted else 0,
        "original_price": 2000,
        "final_price": 1000,
        "currency": "USD",
        "large_capsule_image": "large.jpg",
        "small_capsule_image": "small.jpg",
        "windows_available": True,
        "mac_available": False,
        "linux_available": True,
        "streamingvideo_available": False,
        "header_image": "header.jpg",
    }


def platforms():
    return {"windows": True, "mac": False, "linux": True}


def package_data():
    return {
        "name": "Grim Dawn Package",
        "page_image": "page.jpg",
        "small_logo": "logo.jpg",
        "apps": [{"id": 219990, "name": "Grim Dawn"}],
        "price": {
            "currency": "USD",
            "initial": 2499,
            "final": 1249,
            "discount_percent": 50,
            "individual": 2499,
        },
        "platforms": platforms(),
        "controller": {"full_gamepad": True},
        "release_date": {"coming_soon": False, "date": "Feb 25, 2016"},
    }


def price_overview(initial, final):
    return {
        "currency": "USD",
        "initial": initial,
        "final": final,
        "discount_percent": 50,
        "initial_formatted": f"${initial / 100:.2f}",
        "final_formatted": f"${final / 100:.2f}",
    }


def review(review_id):
    return {
        "recommendationid": review_id,
        "author": {
            "steamid": "76500000000000000",
            "num_games_owned": 10,
            "num_reviews": 2,
            "playtime_forever": 100,
            "playtime_last_two_weeks": 0,
            "playtime_at_review": 50,
            "last_played": 1600000000,
        },
        "language": "english",
        "review": "fun",
        "timestamp_created": 1600000000,
        "timestamp_updated": 1600000000,
        "received_for_free": False,
        "steam_purchase": True,
        "voted_up": True,
        "votes_up": 3,
        "votes_funny": 1,
        "weighted_vote_score": "0.5",
        "written_during_early_access": False,
    }


def test_build_rejects_unknown_country_code():
    with pytest.raises(IncorrectCountryCodeError, match="failed to parse country"):
        SteamBuilder().with_country_code("zz").build()


def test_invalid_store_url_is_rejected():
    with pytest.raises(UrlError):
        SteamBuilder().with_store_url("not a url")


@pytest.mark.asyncio
async def test_language_and_country_are_appended_after_params():
    builder = Steam.builder().with_country_code("us").with_language(Language.ENGLISH)
    payload = {"status": 1, "id": "action", "name": "Action", "tabs": None}
    client, recorder = make_client({"/api/getappsingenre/": payload}, builder)
    async with client:
        result = await client.apps_in_genre("action")
    assert result.id == "action"
    params = recorder.requests[0].url.params
    assert list(params.keys()) == ["genre", "l", "cc"]
    assert params["cc"] == "US"
    assert params["l"] == "english"


@pytest.mark.asyncio
async def test_custom_store_url_is_used():
    builder = Steam.builder().with_store_url("http://localhost:8080/")
    payload = {"status": 1, "genres": [{"id": "1", "description": "Action"}]}
    client, recorder = make_client({"/api/getgenrelist/": payload}, builder)
    async with client:
        genres = await client.genres()
    assert [genre.description for genre in genres] == ["Action"]
    assert recorder.requests[0].url.host == "localhost"
    assert recorder.requests[0].url.port == 8080


@pytest.mark.asyncio
async def test_genres_with_failed_status():
    client, _ = make_client({"/api/getgenrelist/": {"status": 0, "genres": []}})
    async with client:
        with pytest.raises(ResponseWithNoSuccessError, match="response with no success"):
            await client.genres()


@pytest.mark.asyncio
async def test_featured_is_parsed():
    payload = {
        "featured_win": [featured_item(10)],
        "featured_mac": [],
        "featured_linux": [featured_item(20), featured_item(30, False)],
        "status": 1,
    }
    client, recorder = make_client({"/api/featured/": payload})
    async with client:
        featured = await client.featured()
    assert [item.app_id for item in featured.featured_linux] == [20, 30]
    assert featured.featured_win[0].name == "Game 10"
    assert recorder.requests[0].url.query == b""


@pytest.mark.asyncio
async def test_featured_with_failed_status():
    payload = {"featured_win": [], "featured_mac": [], "featured_linux": [], "status": 2}
    client, _ = make_client({"/api/featured/": payload})
    async with client:
        with pytest.raises(ResponseWithNoSuccessError):
            await client.featured()


@pytest.mark.asyncio
async def test_apps_in_category_sends_category():
    payload = {
        "status": 1,
        "id": "cat_newreleases",
        "name": "New Releases",
        "tabs": {
            "topsellers": {
                "name": "Top Sellers",
                "total_item_count": 1,
                "items": [{"type": 0, "id": 219990}],
            }
        },
    }
    client, recorder = make_client({"/api/getappsincategory/": payload})
    async with client:
        result = await client.apps_in_category("cat_newreleases")
    assert recorder.requests[0].url.params["category"] == "cat_newreleases"
    assert result.tabs["topsellers"].items[0].app_id == 219990


@pytest.mark.asyncio
async def test_featured_categories_drop_status():
    payload = {
        "status": 1,
        "specials": {"id": "cat_specials", "name": "Specials", "items": [featured_item(5)]},
        "coming_soon": {"id": "cat_comingsoon", "name": "Coming Soon"},
    }
    client, _ = make_client({"/api/featuredcategories/": payload})
    async with client:
        categories = await client.featured_categories()
    assert set(categories) == {"specials", "coming_soon"}
    assert categories["specials"].items[0].app_id == 5
    assert categories["coming_soon"].items is None


@pytest.mark.asyncio
async def test_package_sets_id():
    payload = {"12345": {"success": True, "data": package_data()}}
    client, recorder = make_client({"/api/packagedetails/": payload})
    async with client:
        package = await client.package(12345)
    assert package.pkg_id == 12345
    assert package.apps[0].name == "Grim Dawn"
    assert recorder.requests[0].url.params["packageids"] == "12345"


@pytest.mark.asyncio
async def test_package_errors():
    routes = {"/api/packagedetails/": {}}
    client, _ = make_client(routes)
    async with client:
        with pytest.raises(IdNotFoundError) as info:
            await client.package(7)
        assert info.value.id == "7"
        routes["/api/packagedetails/"] = {"7": {"success": False}}
        with pytest.raises(ResponseWithNoSuccessError):
            await client.package(7)
        routes["/api/packagedetails/"] = {"7": {"success": True}}
        with pytest.raises(ResponseWithNoDataError, match="rate limit"):
            await client.package(7)


@pytest.mark.asyncio
async def test_reviews_request():
    payload = {
        "success": 1,
        "reviews": [review("1"), review("2")],
        "query_summary": {"num_reviews": 2},
        "cursor": "next",
    }
    client, recorder = make_client({"/appreviews/489830": payload})
    review_filter = ReviewsFilter(
        cursor="*", language=Language.ENGLISH, offtopic_activity=OfftopicActivity.INCLUDE
    )
    async with client:
        reviews = await client.reviews(489830, review_filter)
    assert [r.review_id for r in reviews.reviews] == ["1", "2"]
    assert reviews.cursor == "next"
    params = recorder.requests[0].url.params
    assert params["json"] == "1"
    assert params["cursor"] == "*"
    assert params["filter_offtopic_activity"] == "0"


@pytest.mark.asyncio
async def test_reviews_with_failed_status():
    payload = {"success": 0, "reviews": [], "query_summary": {"num_reviews": 0}, "cursor": ""}
    client, _ = make_client({"/appreviews/1": payload})
    async with client:
        with pytest.raises(ResponseWithNoSuccessError):
            await client.reviews(1, ReviewsFilter())


@pytest.mark.asyncio
async def test_dlc():
    dlc_item = {
        "id": 310380,
        "name": "Ashes of Malmouth",
        "header_image": "header.jpg",
        "price_overview": {"currency": "USD", "initial": 1499, "final": 749, "discount_percent": 50},
        "platforms": platforms(),
        "release_date": {"coming_soon": False},
    }
    routes = {"/api/dlcforapp/": {"status": 1, "appid": "219990", "name": "Grim Dawn", "dlc": [dlc_item]}}
    client, recorder = make_client(routes)
    async with client:
        data = await client.dlc(219990)
        assert [d.dlc_id for d in data.dlc] == [310380]
        assert recorder.requests[0].url.params["appid"] == "219990"
        routes["/api/dlcforapp/"] = {"status": 1, "appid": "219990", "name": "Grim Dawn"}
        with pytest.raises(ResponseWithNoDataError):
            await client.dlc(219990)
        routes["/api/dlcforapp/"] = {"status": 0, "appid": "219990", "name": "Grim Dawn"}
        with pytest.raises(ResponseWithNoSuccessError):
            await client.dlc(219990)


@pytest.mark.asyncio
async def test_app_details():
    payload = {
        "219990": {
            "success": True,
            "data": {"type": "game", "name": "Grim Dawn", "steam_appid": 219990, "packages": [1, 2]},
        }
    }
    client, recorder = make_client({"/api/appdetails/": payload})
    async with client:
        app = await client.app(219990)
        assert (app.app_id, app.name, app.packages) == (219990, "Grim Dawn", [1, 2])
        assert recorder.requests[0].url.params["appids"] == "219990"
        with pytest.raises(IdNotFoundError, match="id 5 was not found in response"):
            await client.app(5)


@pytest.mark.asyncio
async def test_price_skips_failures_and_sets_ids():
    payload = {
        "10": {"success": True, "data": {"price_overview": price_overview(1999, 999)}},
        "20": {"success": False},
        "30": {"success": True, "data": {"price_overview": price_overview(500, 250)}},
    }
    client, recorder = make_client({"/api/appdetails/": payload})
    async with client:
        prices = await client.price([10, 20, 30])
    assert [(p.app_id, p.price.final) for p in prices] == [(10, 999), (30, 250)]
    params = recorder.requests[0].url.params
    assert params["appids"] == "10,20,30"
    assert params["filters"] == "price_overview"


@pytest.mark.asyncio
async def test_price_with_bad_id():
    payload = {"abc": {"success": True, "data": {"price_overview": price_overview(100, 50)}}}
    client, _ = make_client({"/api/appdetails/": payload})
    async with client:
        with pytest.raises(ParseIdError, match="failed to parse id"):
            await client.price([1])


@pytest.mark.asyncio
async def test_invalid_json_is_a_request_error():
    client, _ = make_client(
        {"/api/featured/": lambda request: httpx.Response(200, content=b"not json")}
    )
    async with client:
        with pytest.raises(RequestError):
            await client.featured()


@pytest.mark.asyncio
async def test_transport_failure_is_a_request_error():
    def fail(request):
        raise httpx.ConnectError("connection refused", request=request)

    client, _ = make_client({"/api/featured/": fail})
    async with client:
        with pytest.raises(RequestError, match="connection refused"):
            await client.featured()


@pytest.mark.asyncio
async def test_malformed_payload_is_a_request_error():
    client, _ = make_client({"/api/featured/": {"status": 1}})
    async with client:
        with pytest.raises(RequestError):
            await client.featured()