from __future__ import annotations

from enum import Enum


class InvoiceStatus(str, Enum):
    """Invoice status as stored in the database."""

    PENDING = "pending"
    PAID = "paid"


class PageCountMode(str, Enum):
    """How the invoice list computes its total number of pages.

    CUSTOMER counts the invoices of the first customer matching the query.
    INVOICE counts every invoice the search itself would return.
    """

    CUSTOMER = "customer"
    INVOICE = "invoice"
