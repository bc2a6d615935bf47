import pytest
from conftest import SEOUL, make_place

from lunchpick.errors import NetworkError
from lunchpick.recommendations.models import FoodCategory


@pytest.mark.asyncio
async def test_fetch_merges_two_pages_of_korean_places(fake_client_factory):
    pages = {
        1: [make_place(i) for i in range(15)],
        2: [make_place(i) for i in range(15, 20)],
    }
    client, aggregator = fake_client_factory(pages)

    restaurants = await aggregator.fetch(SEOUL, 1000, FoodCategory.korean)

    assert len(restaurants) == 20
    assert all(r.category == FoodCategory.korean for r in restaurants)
    assert [c["keyword"] for c in client.calls] == ["한식", "한식"]
    assert [c["page"] for c in client.calls] == [1, 2]
    assert all(c["size"] == 15 and c["radius"] == 1000 for c in client.calls)
    assert all(c["category_code"] is None for c in client.calls)


@pytest.mark.asyncio
async def test_fetch_preserves_page_order(fake_client_factory):
    pages = {
        1: [make_place(i) for i in range(3)],
        2: [make_place(i) for i in range(3, 6)],
    }
    _, aggregator = fake_client_factory(pages)

    restaurants = await aggregator.fetch(SEOUL, 500)

    assert [r.name for r in restaurants] == [f"Place {i}" for i in range(6)]


@pytest.mark.asyncio
async def test_fetch_requests_second_page_even_when_first_is_empty(fake_client_factory):
    client, aggregator = fake_client_factory({2: [make_place(1)]})

    restaurants = await aggregator.fetch(SEOUL, 1000, FoodCategory.all)

    assert len(client.calls) == 2
    assert client.calls[0]["keyword"] == "음식점"
    assert len(restaurants) == 1


@pytest.mark.asyncio
async def test_fetch_maps_place_fields(fake_client_factory):
    place = make_place(
        1,
        category_name="음식점 > 양식 > 이탈리안",
        code="FD9",
        x="127.0276",
        y="37.4979",
        phone="",
    )
    _, aggregator = fake_client_factory({1: [place]})

    [restaurant] = await aggregator.fetch(SEOUL, 1000, FoodCategory.western)

    assert restaurant.name == "Place 1"
    assert restaurant.category == FoodCategory.western
    assert restaurant.latitude == pytest.approx(37.4979)
    assert restaurant.longitude == pytest.approx(127.0276)
    assert restaurant.address == "서울 중구 태평로1가 1"
    assert restaurant.phone_number is None
    assert restaurant.menu == ()


@pytest.mark.asyncio
async def test_fetch_bad_coordinates_fall_back_to_zero(fake_client_factory):
    _, aggregator = fake_client_factory({1: [make_place(1, x="", y="n/a")]})

    [restaurant] = await aggregator.fetch(SEOUL, 1000)

    assert restaurant.latitude == 0.0
    assert restaurant.longitude == 0.0


@pytest.mark.asyncio
async def test_fetch_attaches_catalog_menus_when_enabled(fake_client_factory):
    places = [make_place(1, code="FD7", category_name="음식점 > 중식"), make_place(2, code="AT4")]
    _, aggregator = fake_client_factory({1: places}, attach_menus=True)

    first, second = await aggregator.fetch(SEOUL, 1000)

    assert [m.name for m in first.menu] == ["짜장면", "짬뽕", "탕수육"]
    assert second.menu == ()


@pytest.mark.asyncio
async def test_fetch_propagates_client_errors(fake_client_factory):
    _, aggregator = fake_client_factory(error=NetworkError("down"))

    with pytest.raises(NetworkError):
        await aggregator.fetch(SEOUL, 1000, FoodCategory.korean)


@pytest.mark.asyncio
async def test_search_uses_category_code_and_attaches_menus(fake_client_factory):
    client, aggregator = fake_client_factory({1: [make_place(1, code="CE7", category_name="카페")]})

    [restaurant] = await aggregator.search("스타벅스", SEOUL, FoodCategory.cafe)

    assert client.calls[0]["keyword"] == "스타벅스"
    assert client.calls[0]["category_code"] == "CE7"
    assert len(client.calls) == 1
    assert restaurant.category == FoodCategory.cafe
    assert [m.name for m in restaurant.menu] == ["아메리카노", "카페라떼", "카푸치노"]
