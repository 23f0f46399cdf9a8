from __future__ import annotations

from datetime import date

import pytest

from invoice_dashboard.core.enums import InvoiceStatus
from invoice_dashboard.core.exceptions import DataUnavailableError
from invoice_dashboard.extensions import db
from invoice_dashboard.invoices.sql_invoice_repository import SQLInvoiceRepository


@pytest.fixture
def repo(app_ctx):
    return SQLInvoiceRepository(db)


def test_search_pages_are_six_rows_ordered_by_date_desc(repo, sample_data):
    first = repo.search("", offset=0, limit=6)
    second = repo.search("", offset=6, limit=6)
    third = repo.search("", offset=12, limit=6)

    assert len(first) == 6
    assert len(second) == 5
    assert third == []

    dates = [r.date for r in list(first) + list(second)]
    assert dates == sorted(dates, reverse=True)
    assert first[0].date == date(2023, 8, 19)
    assert first[0].name == "Delba de Oliveira"
    assert second[-1].date == date(2022, 11, 14)


def test_search_matches_customer_date_and_status_text(repo, sample_data):
    assert {r.name for r in repo.search("Robinson", offset=0, limit=20)} == {"Lee Robinson"}
    assert len(repo.search("Robinson", offset=0, limit=20)) == 8
    assert len(repo.search("2023-06", offset=0, limit=20)) == 8
    assert len(repo.search("oliveira.com", offset=0, limit=20)) == 3

    pending = repo.search("pending", offset=0, limit=20)
    assert len(pending) == 3
    assert all(r.status == InvoiceStatus.PENDING for r in pending)


def test_search_is_case_sensitive(repo, sample_data):
    assert repo.search("robinson", offset=0, limit=20) == []
    assert repo.search("LEE@ROBINSON.COM", offset=0, limit=20) == []
    assert repo.search("PAID", offset=0, limit=20) == []
    assert len(repo.search("Robinson", offset=0, limit=20)) == 8


def test_page_counts_are_case_sensitive(repo, sample_data):
    assert repo.count_search_matches("robinson") == 0
    assert repo.count_search_matches("Robinson") == 8
    assert repo.count_first_matching_customer_invoices("robinson") == 0
    assert repo.count_first_matching_customer_invoices("Robinson") == 8


def test_search_treats_like_wildcards_literally(repo, sample_data):
    assert repo.search("%", offset=0, limit=20) == []
    assert repo.search("_", offset=0, limit=20) == []


def test_search_row_carries_customer_display_fields(repo, sample_data):
    row = repo.search("2022-12-06", offset=0, limit=6)[0]

    assert row.name == "Delba de Oliveira"
    assert row.email == "delba@oliveira.com"
    assert row.image_url == "/customers/x.png"
    assert row.amount == 15795
    assert row.status == InvoiceStatus.PENDING


def test_count_search_matches_counts_every_match(repo, sample_data):
    assert repo.count_search_matches("") == 11
    assert repo.count_search_matches("pending") == 3
    assert repo.count_search_matches("nothing-like-this") == 0


def test_count_first_matching_customer_invoices(repo, sample_data):
    # empty query: first customer by id is Delba with 3 invoices
    assert repo.count_first_matching_customer_invoices("") == 3
    assert repo.count_first_matching_customer_invoices("Lee") == 8
    # matched through an invoice date, counts all of that customer's invoices
    assert repo.count_first_matching_customer_invoices("2023-06-0") == 8
    # Delba and Lee both own pending invoices; only Delba's are counted
    assert repo.count_first_matching_customer_invoices("pending") == 3
    assert repo.count_first_matching_customer_invoices("nothing-like-this") == 0


def test_latest_invoices_are_five_most_recent(repo, sample_data):
    latest = repo.list_latest(5)

    assert len(latest) == 5
    assert [r.date for r in latest] == [
        date(2023, 8, 19),
        date(2023, 6, 8),
        date(2023, 6, 7),
        date(2023, 6, 6),
        date(2023, 6, 5),
    ]


def test_totals_by_status_and_count(repo, make_customer, make_invoice):
    customer = make_customer("Evil Rabbit", "evil@rabbit.com")
    make_invoice(customer, 100, "paid", date(2023, 1, 1))
    make_invoice(customer, 200, "pending", date(2023, 1, 2))
    make_invoice(customer, 50, "paid", date(2023, 1, 3))

    assert repo.count_all() == 3
    assert repo.total_amount_by_status(InvoiceStatus.PAID) == 150
    assert repo.total_amount_by_status(InvoiceStatus.PENDING) == 200


def test_totals_default_to_zero_without_invoices(repo):
    assert repo.count_all() == 0
    assert repo.total_amount_by_status(InvoiceStatus.PAID) == 0


def test_get_by_id_and_missing_id(repo, make_customer, make_invoice):
    customer = make_customer("Evil Rabbit", "evil@rabbit.com")
    invoice = make_invoice(customer, 5000, "paid", date(2023, 1, 1))

    record = repo.get_by_id(invoice.id)

    assert record.amount == 5000
    assert record.customer_id == customer.id
    assert record.status == InvoiceStatus.PAID
    assert repo.get_by_id(invoice.id + 100) is None


def test_create_update_delete(repo, make_customer):
    a = make_customer("Evil Rabbit", "evil@rabbit.com")
    b = make_customer("Amy Burns", "amy@burns.com")

    invoice_id = repo.create(customer_id=a.id, amount=1234, status=InvoiceStatus.PENDING, issued_on=date(2024, 2, 1))
    assert repo.get_by_id(invoice_id).amount == 1234

    assert repo.update(invoice_id=invoice_id, customer_id=b.id, amount=999, status=InvoiceStatus.PAID) is True
    record = repo.get_by_id(invoice_id)
    assert (record.customer_id, record.amount, record.status) == (b.id, 999, InvoiceStatus.PAID)
    assert record.date == date(2024, 2, 1)

    assert repo.update(invoice_id=invoice_id + 1, customer_id=b.id, amount=1, status=InvoiceStatus.PAID) is False
    assert repo.delete_by_id(invoice_id) is True
    assert repo.delete_by_id(invoice_id) is False


def test_store_errors_become_data_unavailable(repo, sample_data, caplog):
    db.drop_all()

    with pytest.raises(DataUnavailableError) as excinfo:
        repo.search("", offset=0, limit=6)

    assert str(excinfo.value) == "Failed to fetch invoices."
    assert excinfo.value.__cause__ is not None
    assert "Database Error" in caplog.text
