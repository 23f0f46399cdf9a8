from __future__ import annotations

import pytest

from invoice_dashboard.database.models import Invoice
from invoice_dashboard.extensions import db


def login(client, email="user@nextmail.com", password="123456"):
    return client.post("/login", data={"email": email, "password": password})


@pytest.fixture
def signed_in(client, demo_user, sample_data):
    response = login(client)
    assert response.status_code == 302
    return client


def test_dashboard_requires_login(client, app_ctx):
    response = client.get("/dashboard")

    assert response.status_code == 302
    assert "/login" in response.headers["Location"]


def test_login_rejects_wrong_password(client, demo_user):
    response = login(client, password="wrong-password")

    assert response.status_code == 401
    assert b"Invalid credentials." in response.data


def test_login_rejects_malformed_email(client, demo_user):
    response = login(client, email="not-an-email")

    assert response.status_code == 401
    assert b"Invalid credentials." in response.data


def test_login_redirects_to_dashboard(client, demo_user):
    response = login(client)

    assert response.status_code == 302
    assert response.headers["Location"].endswith("/dashboard")


def test_dashboard_shows_cards(signed_in):
    response = signed_in.get("/dashboard")

    assert response.status_code == 200
    assert response.headers["Cache-Control"] == "no-store"
    assert b"$448.48" in response.data
    assert b"$277.95" in response.data
    assert b"Lee Robinson" in response.data


def test_invoices_page_filters_and_paginates(signed_in):
    response = signed_in.get("/dashboard/invoices?query=Lee")

    assert response.status_code == 200
    assert response.headers["Cache-Control"] == "no-store"
    assert b"Lee Robinson" in response.data
    assert b"Delba de Oliveira" not in response.data
    assert b"page=2" in response.data


def test_invoices_page_treats_bad_page_as_first(signed_in):
    response = signed_in.get("/dashboard/invoices?page=abc")

    assert response.status_code == 200
    assert b"Aug 19, 2023" in response.data


def test_customers_page_shows_totals(signed_in):
    response = signed_in.get("/dashboard/customers?query=lee")

    assert response.status_code == 200
    assert b"$240.00" in response.data
    assert b"$120.00" in response.data
    assert b"Amy Burns" not in response.data


def test_create_invoice_form_renders(signed_in):
    response = signed_in.get("/dashboard/invoices/create")

    assert response.status_code == 200
    assert b"Amy Burns" in response.data


def test_create_invoice_reports_field_errors(signed_in):
    response = signed_in.post("/dashboard/invoices/create", data={"amount": "0"})

    assert response.status_code == 400
    assert b"Please select a customer." in response.data
    assert b"Please enter an amount greater than $0." in response.data
    assert b"Please select an invoice status." in response.data
    assert db.session.query(Invoice).count() == 11


def test_create_invoice(signed_in, sample_data):
    amy_id = sample_data["amy"].id

    response = signed_in.post(
        "/dashboard/invoices/create",
        data={"customer_id": str(amy_id), "amount": "19.99", "status": "pending"},
    )

    assert response.status_code == 302
    created = db.session.query(Invoice).filter_by(customer_id=amy_id).one()
    assert created.amount == 1999
    assert created.status == "pending"


def test_edit_invoice(signed_in, sample_data):
    invoice = db.session.query(Invoice).filter_by(customer_id=sample_data["delba"].id, amount=500).one()
    invoice_id = invoice.id

    page = signed_in.get(f"/dashboard/invoices/{invoice_id}/edit")
    assert page.status_code == 200
    assert b'value="5.0"' in page.data

    response = signed_in.post(
        f"/dashboard/invoices/{invoice_id}/edit",
        data={"customer_id": str(sample_data["delba"].id), "amount": "7", "status": "pending"},
    )

    assert response.status_code == 302
    db.session.expire_all()
    assert db.session.get(Invoice, invoice_id).amount == 700


def test_edit_missing_invoice_is_not_found(signed_in):
    response = signed_in.get("/dashboard/invoices/9999/edit")

    assert response.status_code == 404
    assert b"Could not find the requested invoice." in response.data


def test_delete_invoice(signed_in, sample_data):
    invoice_id = db.session.query(Invoice.id).filter_by(customer_id=sample_data["delba"].id).first()[0]

    response = signed_in.post(f"/dashboard/invoices/{invoice_id}/delete")

    assert response.status_code == 302
    assert db.session.query(Invoice).count() == 10


def test_logout_ends_the_session(signed_in):
    response = signed_in.post("/logout")
    assert response.status_code == 302

    assert signed_in.get("/dashboard").status_code == 302


def test_store_failure_renders_error_page(signed_in):
    db.drop_all()

    response = signed_in.get("/dashboard")

    assert response.status_code == 500
    assert b"Something went wrong!" in response.data


def test_unknown_url_gets_generic_not_found_page(client, app_ctx):
    response = client.get("/no-such-page")

    assert response.status_code == 404
    assert b"Could not find the requested page." in response.data
    assert b"requested invoice" not in response.data


def test_invoice_search_is_case_sensitive(signed_in):
    response = signed_in.get("/dashboard/invoices?query=robinson")

    assert response.status_code == 200
    assert b"Lee Robinson" not in response.data
    assert b"page=2" not in response.data
