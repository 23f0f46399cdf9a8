from __future__ import annotations

from datetime import date

import pytest
from werkzeug.security import generate_password_hash

from invoice_dashboard import create_app
from invoice_dashboard.database.connection import shutdown_db
from invoice_dashboard.database.models import Customer, Invoice, Revenue, User
from invoice_dashboard.extensions import db


@pytest.fixture
def app():
    app = create_app("invoice_dashboard.config.testing")
    yield app
    shutdown_db(app)


@pytest.fixture
def app_ctx(app):
    with app.app_context():
        yield app


@pytest.fixture
def client(app):
    return app.test_client()


def add_customer(name: str, email: str, image_url: str = "/customers/x.png") -> Customer:
    customer = Customer(name=name, email=email, image_url=image_url)
    db.session.add(customer)
    db.session.commit()
    return customer


def add_invoice(customer: Customer, amount: int, status: str, issued: date) -> Invoice:
    invoice = Invoice(customer_id=customer.id, amount=amount, status=status, date=issued)
    db.session.add(invoice)
    db.session.commit()
    return invoice


@pytest.fixture
def sample_data(app_ctx):
    """Two customers with invoices plus one customer without any.

    Delba: 3 invoices, Lee: 8 invoices (2 pending), Amy: none.
    """
    delba = add_customer("Delba de Oliveira", "delba@oliveira.com")
    lee = add_customer("Lee Robinson", "lee@robinson.com")
    amy = add_customer("Amy Burns", "amy@burns.com")

    add_invoice(delba, 15795, "pending", date(2022, 12, 6))
    add_invoice(delba, 20348, "paid", date(2022, 11, 14))
    add_invoice(delba, 500, "paid", date(2023, 8, 19))
    for day in range(1, 9):
        add_invoice(lee, 1000 * day, "pending" if day % 4 == 0 else "paid", date(2023, 6, day))

    for month, total in [("Jan", 2000), ("Feb", 1800), ("Mar", 2200)]:
        db.session.add(Revenue(month=month, revenue=total))
    db.session.commit()

    return {"delba": delba, "lee": lee, "amy": amy}


@pytest.fixture
def demo_user(app_ctx):
    user = User(name="User", email="user@nextmail.com", password=generate_password_hash("123456"))
    db.session.add(user)
    db.session.commit()
    return user


@pytest.fixture
def make_customer(app_ctx):
    return add_customer


@pytest.fixture
def make_invoice(app_ctx):
    return add_invoice
