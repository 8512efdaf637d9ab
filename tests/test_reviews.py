"""
Tests for reviews embedded in product documents.
"""
from datetime import date

import pytest
from bson import ObjectId

from app.stores import ReviewStore
from app.utils.dates import current_date
from app.utils.exceptions import InvalidIdError, NotFoundError, ValidationError


class UntouchableCollection:
    """Fails the test if the store is consulted at all."""

    def __getattr__(self, name):
        raise AssertionError(f"collection accessed: {name}")


@pytest.fixture
def fixed_date(monkeypatch):
    def set_date(value):
        monkeypatch.setattr("app.stores.reviews.current_date", lambda: value)
    return set_date


async def test_create_review_returns_new_review(review_store, product):
    review = await review_store.create_review(product["_id"], "  Great ", " Ann ", " Lovely picture ", 4.5)

    assert ObjectId.is_valid(review["_id"])
    assert review["title"] == "Great"
    assert review["reviewerName"] == "Ann"
    assert review["review"] == "Lovely picture"
    assert review["rating"] == 4.5
    assert review["reviewDate"] == current_date()


async def test_create_review_appends_and_updates_average(review_store, product_store, product):
    first = await review_store.create_review(product["_id"], "Meh", "Bob", "Too dark", 2)
    second = await review_store.create_review(product["_id"], "Good", "Cy", "Bright", 4)

    stored = await product_store.get(product["_id"])

    assert [review["_id"] for review in stored["reviews"]] == [first["_id"], second["_id"]]
    assert stored["averageRating"] == 3


async def test_review_ids_are_unique_across_products(review_store, product_store, product_fields, product):
    other = await product_store.create(**product_fields)

    first = await review_store.create_review(product["_id"], "A", "Ann", "Text", 3)
    second = await review_store.create_review(other["_id"], "A", "Ann", "Text", 3)

    assert first["_id"] != second["_id"]
    assert (await review_store.get_review(second["_id"]))["_id"] == second["_id"]


async def test_create_review_rejects_invalid_fields(review_store, product_store, product):
    with pytest.raises(ValidationError):
        await review_store.create_review(product["_id"], "Title", "Ann", "Body", 5.5)
    with pytest.raises(ValidationError):
        await review_store.create_review(product["_id"], "   ", "Ann", "Body", 3)
    with pytest.raises(ValidationError):
        await review_store.create_review(product["_id"], "Title", None, "Body", 3)

    assert (await product_store.get(product["_id"]))["reviews"] == []


async def test_create_review_unknown_product(review_store):
    with pytest.raises(NotFoundError):
        await review_store.create_review(str(ObjectId()), "Title", "Ann", "Body", 3)


async def test_create_review_malformed_product_id(review_store):
    with pytest.raises(InvalidIdError):
        await review_store.create_review("abc", "Title", "Ann", "Body", 3)


async def test_get_all_reviews(review_store, product):
    assert await review_store.get_all_reviews(product["_id"]) == []

    review = await review_store.create_review(product["_id"], "Title", "Ann", "Body", 3)

    assert await review_store.get_all_reviews(product["_id"]) == [review]


async def test_get_all_reviews_unknown_product(review_store):
    with pytest.raises(NotFoundError):
        await review_store.get_all_reviews(str(ObjectId()))


async def test_get_review_returns_only_the_review(review_store, product):
    await review_store.create_review(product["_id"], "First", "Ann", "Body", 1)
    review = await review_store.create_review(product["_id"], "Second", "Bob", "Body", 5)

    fetched = await review_store.get_review(review["_id"])

    assert fetched == review
    assert "productName" not in fetched


async def test_get_review_not_found_and_malformed(review_store, product):
    with pytest.raises(NotFoundError):
        await review_store.get_review(product["_id"])
    with pytest.raises(InvalidIdError):
        await review_store.get_review("  ")


async def test_partial_update_carries_forward_other_fields(review_store, product, fixed_date):
    fixed_date("01/02/2020")
    review = await review_store.create_review(product["_id"], "Great", "Ann", "Lovely picture", 2)

    fixed_date("10/19/2026")
    updated_product = await review_store.update_review(review["_id"], {"rating": 4})

    assert updated_product["_id"] == product["_id"]
    updated = updated_product["reviews"][0]
    assert updated["_id"] == review["_id"]
    assert updated["title"] == "Great"
    assert updated["reviewerName"] == "Ann"
    assert updated["review"] == "Lovely picture"
    assert updated["rating"] == 4
    assert updated["reviewDate"] == "10/19/2026"
    assert updated_product["averageRating"] == 4


async def test_update_trims_text_fields(review_store, product):
    review = await review_store.create_review(product["_id"], "Great", "Ann", "Body", 3)

    await review_store.update_review(review["_id"], {"title": "  Better  ", "review": " New body"})

    fetched = await review_store.get_review(review["_id"])
    assert fetched["title"] == "Better"
    assert fetched["review"] == "New body"


async def test_update_only_touches_matched_review(review_store, product):
    first = await review_store.create_review(product["_id"], "First", "Ann", "Body", 1)
    second = await review_store.create_review(product["_id"], "Second", "Bob", "Body", 3)

    updated_product = await review_store.update_review(second["_id"], {"title": "Changed", "rating": 5})

    assert await review_store.get_review(first["_id"]) == first
    changed = await review_store.get_review(second["_id"])
    assert changed["title"] == "Changed"
    assert changed["rating"] == 5
    assert [review["title"] for review in updated_product["reviews"]] == ["First", "Changed"]
    assert updated_product["averageRating"] == 3


async def test_update_review_that_disappears_raises_not_found(collection, product_store, rating_aggregator, product):
    """A review pulled between lookup and write is reported, not silently skipped."""
    class VanishingCollection:
        def __getattr__(self, name):
            return getattr(collection, name)

        async def update_one(self, filter, update):
            await collection.update_one({"_id": filter["_id"]}, {"$set": {"reviews": []}})
            return await collection.update_one(filter, update)

    review = await ReviewStore(collection, product_store, rating_aggregator).create_review(
        product["_id"], "Title", "Ann", "Body", 3
    )
    store = ReviewStore(VanishingCollection(), product_store, rating_aggregator)

    with pytest.raises(NotFoundError):
        await store.update_review(review["_id"], {"rating": 4})


async def test_empty_update_fails_before_store_access():
    store = ReviewStore(UntouchableCollection(), None, None)

    with pytest.raises(ValidationError):
        await store.update_review(str(ObjectId()), {})


@pytest.mark.parametrize("update_fields", [
    {"rating": 5.5},
    {"rating": "4"},
    {"title": "   "},
    {"reviewerName": None},
    {"productName": "not a review field"},
])
async def test_update_rejects_invalid_fields(review_store, product, update_fields):
    review = await review_store.create_review(product["_id"], "Great", "Ann", "Body", 3)

    with pytest.raises(ValidationError):
        await review_store.update_review(review["_id"], update_fields)

    assert await review_store.get_review(review["_id"]) == review


async def test_update_unknown_review(review_store):
    with pytest.raises(NotFoundError):
        await review_store.update_review(str(ObjectId()), {"rating": 3})


async def test_update_malformed_review_id(review_store):
    with pytest.raises(InvalidIdError):
        await review_store.update_review("bad id", {"rating": 3})


async def test_remove_review_keeps_product(review_store, product_store, product):
    first = await review_store.create_review(product["_id"], "Meh", "Bob", "Too dark", 2)
    second = await review_store.create_review(product["_id"], "Good", "Cy", "Bright", 4)

    updated_product = await review_store.remove_review(second["_id"])

    assert updated_product["reviews"] == [first]
    assert updated_product["averageRating"] == 2
    assert await product_store.get(product["_id"]) == updated_product
    with pytest.raises(NotFoundError):
        await review_store.get_review(second["_id"])


async def test_remove_last_review_resets_average(review_store, product):
    review = await review_store.create_review(product["_id"], "Good", "Cy", "Bright", 4)

    updated_product = await review_store.remove_review(review["_id"])

    assert updated_product["reviews"] == []
    assert updated_product["averageRating"] == 0


async def test_remove_unknown_and_malformed_review(review_store):
    with pytest.raises(NotFoundError):
        await review_store.remove_review(str(ObjectId()))
    with pytest.raises(InvalidIdError):
        await review_store.remove_review(42)


async def test_reviews_go_with_deleted_product(review_store, product_store, product):
    review = await review_store.create_review(product["_id"], "Good", "Cy", "Bright", 4)

    await product_store.remove(product["_id"])

    with pytest.raises(NotFoundError):
        await review_store.get_review(review["_id"])


def test_current_date_format():
    assert current_date(date(2024, 3, 7)) == "03/07/2024"
    assert current_date(date(1999, 12, 31)) == "12/31/1999"
