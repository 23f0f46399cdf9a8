from __future__ import annotations

from dataclasses import dataclass

from flask_sqlalchemy import SQLAlchemy

from .core.enums import PageCountMode
from .customers.service import CustomerService
from .customers.sql_customer_repository import SQLCustomerRepository
from .dashboard.service import DashboardService
from .invoices.service import InvoiceService
from .invoices.sql_invoice_repository import SQLInvoiceRepository
from .revenue.sql_revenue_repository import SQLRevenueRepository
from .users.service import AuthService
from .users.sql_user_repository import SQLUserRepository


@dataclass(frozen=True)
class Container:
    users_repo: SQLUserRepository
    customers_repo: SQLCustomerRepository
    invoices_repo: SQLInvoiceRepository
    revenue_repo: SQLRevenueRepository

    auth_service: AuthService
    customer_service: CustomerService
    invoice_service: InvoiceService
    dashboard_service: DashboardService


def build_container(*, database: SQLAlchemy, page_count_mode: PageCountMode = PageCountMode.CUSTOMER) -> Container:
    users_repo = SQLUserRepository(database)
    customers_repo = SQLCustomerRepository(database)
    invoices_repo = SQLInvoiceRepository(database)
    revenue_repo = SQLRevenueRepository(database)

    auth_service = AuthService(users_repo)
    customer_service = CustomerService(customers_repo)
    invoice_service = InvoiceService(invoices_repo, page_count_mode=page_count_mode)
    dashboard_service = DashboardService(revenue_repo, invoices_repo, customers_repo)

    return Container(
        users_repo=users_repo,
        customers_repo=customers_repo,
        invoices_repo=invoices_repo,
        revenue_repo=revenue_repo,
        auth_service=auth_service,
        customer_service=customer_service,
        invoice_service=invoice_service,
        dashboard_service=dashboard_service,
    )
