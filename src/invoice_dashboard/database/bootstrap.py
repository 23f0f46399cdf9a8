from __future__ import annotations

import logging
from datetime import date

import mysql.connector
from flask_sqlalchemy import SQLAlchemy
from sqlalchemy.engine import make_url
from werkzeug.security import generate_password_hash

from .models import Customer, Invoice, Revenue, User

logger = logging.getLogger(__name__)

DEMO_USER = {"name": "User", "email": "user@nextmail.com", "password": "123456"}

DEMO_CUSTOMERS = [
    ("Evil Rabbit", "evil@rabbit.com", "/customers/evil-rabbit.png"),
    ("Delba de Oliveira", "delba@oliveira.com", "/customers/delba-de-oliveira.png"),
    ("Lee Robinson", "lee@robinson.com", "/customers/lee-robinson.png"),
    ("Michael Novotny", "michael@novotny.com", "/customers/michael-novotny.png"),
    ("Amy Burns", "amy@burns.com", "/customers/amy-burns.png"),
    ("Balazs Orban", "balazs@orban.com", "/customers/balazs-orban.png"),
]

# (customer index, amount in cents, status, date)
DEMO_INVOICES = [
    (0, 15795, "pending", date(2022, 12, 6)),
    (1, 20348, "pending", date(2022, 11, 14)),
    (4, 3040, "paid", date(2022, 10, 29)),
    (3, 44800, "paid", date(2023, 9, 10)),
    (5, 34577, "pending", date(2023, 8, 5)),
    (2, 54246, "pending", date(2023, 7, 16)),
    (0, 666, "pending", date(2023, 6, 27)),
    (3, 32545, "paid", date(2023, 6, 9)),
    (4, 1250, "paid", date(2023, 6, 17)),
    (5, 8546, "paid", date(2023, 6, 7)),
    (1, 500, "paid", date(2023, 8, 19)),
    (5, 8945, "paid", date(2023, 6, 3)),
    (2, 1000, "paid", date(2022, 6, 5)),
]

DEMO_REVENUE = [
    ("Jan", 2000), ("Feb", 1800), ("Mar", 2200), ("Apr", 2500),
    ("May", 2300), ("Jun", 3200), ("Jul", 3500), ("Aug", 3700),
    ("Sep", 2500), ("Oct", 2800), ("Nov", 3000), ("Dec", 4800),
]


def ensure_database_exists(uri: str) -> None:
    """Create the MySQL database named in ``uri`` if missing. Other backends are left alone."""
    url = make_url(uri)
    if not url.drivername.startswith("mysql"):
        return

    conn = mysql.connector.connect(
        host=url.host or "localhost",
        port=int(url.port or 3306),
        user=url.username or "root",
        password=url.password or "",
        use_pure=True,
    )
    try:
        cur = conn.cursor()
        cur.execute(
            f"CREATE DATABASE IF NOT EXISTS `{url.database}` CHARACTER SET utf8mb4 COLLATE utf8mb4_unicode_ci;"
        )
        conn.commit()
    finally:
        conn.close()


def create_schema(database: SQLAlchemy) -> list[str]:
    """Create missing tables; returns the table names now present."""
    database.create_all()
    return sorted(database.metadata.tables)


def seed_demo_data(database: SQLAlchemy) -> None:
    """Insert the demo user, customers, invoices and revenue. Safe to run twice."""
    session = database.session

    user = session.query(User).filter_by(email=DEMO_USER["email"]).first()
    password_hash = generate_password_hash(DEMO_USER["password"])
    if user:
        user.name = DEMO_USER["name"]
        user.password = password_hash
    else:
        session.add(User(name=DEMO_USER["name"], email=DEMO_USER["email"], password=password_hash))

    customers: list[Customer] = []
    for name, email, image_url in DEMO_CUSTOMERS:
        customer = session.query(Customer).filter_by(email=email).first()
        if not customer:
            customer = Customer(name=name, email=email, image_url=image_url)
            session.add(customer)
        customers.append(customer)
    session.flush()

    if session.query(Invoice).count() == 0:
        for index, amount, status, issued in DEMO_INVOICES:
            session.add(Invoice(customer_id=customers[index].id, amount=amount, status=status, date=issued))

    for month, total in DEMO_REVENUE:
        bucket = session.query(Revenue).filter_by(month=month).first()
        if bucket:
            bucket.revenue = total
        else:
            session.add(Revenue(month=month, revenue=total))

    session.commit()
    logger.info("demo seed ready (customers=%d)", len(customers))
