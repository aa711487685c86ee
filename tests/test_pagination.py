import math

import pytest

from catalog_bot.services.catalog.pagination import iter_product_pages
from tests.fakes import FakeCatalog, make_product


@pytest.mark.parametrize("total,page_size", [(10, 3), (9, 3), (1, 250), (250, 250)])
def test_visits_every_product_once(total, page_size):
    catalog = FakeCatalog(make_product(i) for i in range(1, total + 1))

    seen = [p.id for page in iter_product_pages(catalog, page_size) for p in page]

    assert seen == list(range(1, total + 1))
    # The last request is the empty page that ends the traversal
    assert len(catalog.list_calls) == math.ceil(total / page_size) + 1


def test_empty_catalog_makes_a_single_request(catalog):
    assert list(iter_product_pages(catalog, 50)) == []
    assert catalog.list_calls == [{"limit": 50, "since_id": 0, "fields": None}]


def test_cursor_moves_to_highest_id_of_previous_page():
    catalog = FakeCatalog(make_product(i) for i in (3, 8, 21, 22, 40))

    list(iter_product_pages(catalog, 2, fields=("id", "title")))

    cursors = [call["since_id"] for call in catalog.list_calls]
    assert cursors == [0, 8, 22, 40]
    assert all(call["fields"] == ("id", "title") for call in catalog.list_calls)


def test_pages_are_lazy():
    catalog = FakeCatalog(make_product(i) for i in range(1, 7))
    pages = iter_product_pages(catalog, 2)

    first = next(pages)

    assert [p.id for p in first] == [1, 2]
    assert len(catalog.list_calls) == 1


def test_page_of_only_malformed_products_still_moves_the_cursor():
    bad = make_product(1)
    bad["title"] = None
    catalog = FakeCatalog([bad, make_product(2), make_product(3)])

    seen = [p.id for page in iter_product_pages(catalog, 1) for p in page]

    assert seen == [2, 3]
    assert [call["since_id"] for call in catalog.list_calls] == [0, 1, 2, 3]
