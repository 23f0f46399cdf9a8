from __future__ import annotations

from typing import Sequence

from flask_sqlalchemy import SQLAlchemy
from sqlalchemy import case, func, or_

from ..core.enums import InvoiceStatus
from ..database.models import Customer as CustomerRow
from ..database.models import Invoice
from ..database.session import db_session
from .model import Customer, CustomerTotals
from .repository import CustomerRepository


def _sum_for_status(status: InvoiceStatus):
    return func.coalesce(func.sum(case((Invoice.status == status.value, Invoice.amount), else_=0)), 0)


class SQLCustomerRepository(CustomerRepository):
    def __init__(self, database: SQLAlchemy):
        self._db = database

    def list_all(self) -> Sequence[Customer]:
        with db_session(self._db, "Failed to fetch all customers.") as session:
            rows = session.query(CustomerRow).order_by(CustomerRow.name.asc()).all()
            return [Customer(id=int(r.id), name=r.name, email=r.email, image_url=r.image_url) for r in rows]

    def count_all(self) -> int:
        with db_session(self._db, "Failed to fetch card data.") as session:
            return int(session.query(func.count(CustomerRow.id)).scalar() or 0)

    def search_with_totals(self, query: str) -> Sequence[CustomerTotals]:
        # One grouped query; customers without invoices survive the outer join with zero totals.
        with db_session(self._db, "Failed to fetch customer table.") as session:
            rows = (
                session.query(
                    CustomerRow.id,
                    CustomerRow.name,
                    CustomerRow.email,
                    CustomerRow.image_url,
                    func.count(Invoice.id).label("total_invoices"),
                    _sum_for_status(InvoiceStatus.PENDING).label("total_pending"),
                    _sum_for_status(InvoiceStatus.PAID).label("total_paid"),
                )
                .outerjoin(Invoice, CustomerRow.id == Invoice.customer_id)
                .filter(
                    or_(
                        CustomerRow.name.icontains(query, autoescape=True),
                        CustomerRow.email.icontains(query, autoescape=True),
                    )
                )
                .group_by(CustomerRow.id, CustomerRow.name, CustomerRow.email, CustomerRow.image_url)
                .order_by(CustomerRow.name.asc())
                .all()
            )
            return [
                CustomerTotals(
                    id=int(r.id),
                    name=r.name,
                    email=r.email,
                    image_url=r.image_url,
                    total_invoices=int(r.total_invoices or 0),
                    total_pending=int(r.total_pending or 0),
                    total_paid=int(r.total_paid or 0),
                )
                for r in rows
            ]
