from __future__ import annotations

from datetime import date
from typing import Optional, Sequence

from flask_sqlalchemy import SQLAlchemy
from sqlalchemy import String, cast, func, or_

from ..core.enums import InvoiceStatus
from ..database.models import Customer, Invoice
from ..database.session import db_session
from .model import InvoiceRecord, InvoiceRow
from .repository import InvoiceRepository


def _case_sensitive(column, dialect: str):
    # SQLite LIKE is made case sensitive per connection in database/connection.py.
    if dialect == "mysql":
        return column.collate("utf8mb4_bin")
    return column


def _invoice_text_matches(query: str, dialect: str):
    # Dates are matched on their ISO text, e.g. "2023-06" finds every June 2023 invoice.
    return or_(
        cast(Invoice.date, String).contains(query, autoescape=True),
        _case_sensitive(Invoice.status, dialect).contains(query, autoescape=True),
    )


def _customer_text_matches(query: str, dialect: str):
    return or_(
        _case_sensitive(Customer.name, dialect).contains(query, autoescape=True),
        _case_sensitive(Customer.email, dialect).contains(query, autoescape=True),
    )


class SQLInvoiceRepository(InvoiceRepository):
    def __init__(self, database: SQLAlchemy):
        self._db = database

    def _rows_query(self, session):
        return session.query(
            Invoice.id,
            Customer.name,
            Customer.email,
            Customer.image_url,
            Invoice.amount,
            Invoice.date,
            Invoice.status,
        ).join(Customer, Customer.id == Invoice.customer_id)

    @staticmethod
    def _to_row(r) -> InvoiceRow:
        return InvoiceRow(
            id=int(r.id),
            name=r.name,
            email=r.email,
            image_url=r.image_url,
            amount=int(r.amount),
            date=r.date,
            status=InvoiceStatus(r.status),
        )

    def list_latest(self, limit: int) -> Sequence[InvoiceRow]:
        with db_session(self._db, "Failed to fetch the latest invoices.") as session:
            rows = self._rows_query(session).order_by(Invoice.date.desc(), Invoice.id.desc()).limit(int(limit)).all()
            return [self._to_row(r) for r in rows]

    def count_all(self) -> int:
        with db_session(self._db, "Failed to fetch card data.") as session:
            return int(session.query(func.count(Invoice.id)).scalar() or 0)

    def total_amount_by_status(self, status: InvoiceStatus) -> int:
        with db_session(self._db, "Failed to fetch card data.") as session:
            total = session.query(func.sum(Invoice.amount)).filter(Invoice.status == status.value).scalar()
            return int(total or 0)

    def search(self, query: str, *, offset: int, limit: int) -> Sequence[InvoiceRow]:
        with db_session(self._db, "Failed to fetch invoices.") as session:
            dialect = session.get_bind().dialect.name
            rows = (
                self._rows_query(session)
                .filter(or_(_customer_text_matches(query, dialect), _invoice_text_matches(query, dialect)))
                .order_by(Invoice.date.desc(), Invoice.id.desc())
                .offset(int(offset))
                .limit(int(limit))
                .all()
            )
            return [self._to_row(r) for r in rows]

    def count_search_matches(self, query: str) -> int:
        with db_session(self._db, "Failed to fetch total number of invoices.") as session:
            dialect = session.get_bind().dialect.name
            total = (
                session.query(func.count(Invoice.id))
                .join(Customer, Customer.id == Invoice.customer_id)
                .filter(or_(_customer_text_matches(query, dialect), _invoice_text_matches(query, dialect)))
                .scalar()
            )
            return int(total or 0)

    def count_first_matching_customer_invoices(self, query: str) -> int:
        with db_session(self._db, "Failed to fetch total number of invoices.") as session:
            dialect = session.get_bind().dialect.name
            customer_id = (
                session.query(Customer.id)
                .filter(
                    or_(
                        _customer_text_matches(query, dialect),
                        Customer.invoices.any(_invoice_text_matches(query, dialect)),
                    )
                )
                .order_by(Customer.id)
                .limit(1)
                .scalar()
            )
            if customer_id is None:
                return 0
            total = session.query(func.count(Invoice.id)).filter(Invoice.customer_id == customer_id).scalar()
            return int(total or 0)

    def get_by_id(self, invoice_id: int) -> Optional[InvoiceRecord]:
        with db_session(self._db, "Failed to fetch invoice.") as session:
            r = session.get(Invoice, int(invoice_id))
            if not r:
                return None
            return InvoiceRecord(
                id=int(r.id),
                customer_id=int(r.customer_id),
                amount=int(r.amount),
                status=InvoiceStatus(r.status),
                date=r.date,
            )

    def create(self, *, customer_id: int, amount: int, status: InvoiceStatus, issued_on: date) -> int:
        with db_session(self._db, "Database Error: Failed to Create Invoice.", commit=True) as session:
            invoice = Invoice(customer_id=int(customer_id), amount=int(amount), status=status.value, date=issued_on)
            session.add(invoice)
            session.flush()
            return int(invoice.id)

    def update(self, *, invoice_id: int, customer_id: int, amount: int, status: InvoiceStatus) -> bool:
        with db_session(self._db, "Database Error: Failed to Update Invoice.", commit=True) as session:
            updated = (
                session.query(Invoice)
                .filter(Invoice.id == int(invoice_id))
                .update(
                    {"customer_id": int(customer_id), "amount": int(amount), "status": status.value},
                    synchronize_session=False,
                )
            )
            return updated > 0

    def delete_by_id(self, invoice_id: int) -> bool:
        with db_session(self._db, "Database Error: Failed to Delete Invoice.", commit=True) as session:
            deleted = session.query(Invoice).filter(Invoice.id == int(invoice_id)).delete(synchronize_session=False)
            return deleted > 0
