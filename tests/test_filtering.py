"""
Testes de busca, filtros e paginação.
"""
import math

import pytest

from bess_console.core.filtering import (
    ALL,
    SortOrder,
    clamp_page,
    count_pages,
    filter_records,
    paginate,
    sort_records,
)
from bess_console.db import seed
from bess_console.models.client import DocumentType


@pytest.fixture
def clients():
    return seed.sample_clients()


def test_search_is_case_insensitive_substring(clients):
    result = filter_records(clients, search="silva")
    assert [c.name for c in result] == ["João Silva"]


def test_filtered_subset_matches_every_predicate(clients):
    result = filter_records(clients, search="a", exact={"document_type": DocumentType.CNPJ})
    assert result
    for client in result:
        assert client in clients
        assert client.document_type == DocumentType.CNPJ
        assert "a" in client.name.lower()


def test_exact_filter_accepts_enum_value_string(clients):
    result = filter_records(clients, exact={"document_type": "cpf"})
    assert [c.id for c in result] == ["1", "3"]


@pytest.mark.parametrize("search", [None, ""])
@pytest.mark.parametrize("category", [None, "", ALL])
def test_empty_filters_return_everything_in_order(clients, search, category):
    result = filter_records(clients, search=search, exact={"document_type": category})
    assert result == clients


def test_all_is_a_literal_search_term(clients):
    assert filter_records(clients, search=ALL) == []

    clients[0].name = "Hall Energia"
    result = filter_records(clients, search=ALL)
    assert [c.id for c in result] == [clients[0].id]


def test_callable_search_field(clients):
    result = filter_records(clients, search="0001", search_fields=(lambda c: c.document_number,))
    assert {c.id for c in result} == {"2", "4"}


def test_sort_records_desc_and_asc(clients):
    ids = [c.id for c in sort_records(clients, lambda c: int(c.id))]
    assert ids == ["4", "3", "2", "1"]
    ids = [c.id for c in sort_records(clients, lambda c: int(c.id), SortOrder.ASC)]
    assert ids == ["1", "2", "3", "4"]


@pytest.mark.parametrize("total, page_size", [(0, 5), (1, 5), (5, 5), (6, 5), (23, 5), (7, 3)])
def test_pages_reconstruct_collection(total, page_size):
    items = list(range(total))
    pages = count_pages(total, page_size)
    assert pages == math.ceil(total / page_size)

    rebuilt = []
    for number in range(1, pages + 1):
        rebuilt.extend(paginate(items, number, page_size).items)
    assert rebuilt == items


def test_page_is_clamped():
    items = list(range(12))
    assert paginate(items, 99, 5).page == 3
    assert paginate(items, 0, 5).page == 1
    assert paginate([], 4, 5).page == 1
    assert clamp_page(-3, 12, 5) == 1


def test_page_indexes():
    page = paginate(list(range(12)), 3, 5)
    assert page.items == [10, 11]
    assert (page.start_index, page.end_index) == (11, 12)
    assert page.has_previous is True
    assert page.has_next is False

    empty = paginate([], 1, 5)
    assert (empty.start_index, empty.end_index, empty.pages) == (0, 0, 0)


def test_invalid_page_size():
    with pytest.raises(ValueError):
        count_pages(10, 0)
