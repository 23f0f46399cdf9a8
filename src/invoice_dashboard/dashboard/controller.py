from __future__ import annotations

from flask import Flask, render_template
from flask_login import login_required

from ..common.web import no_store
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/dashboard", endpoint="dashboard")
    @no_store
    @login_required
    def dashboard():
        svc = container.dashboard_service
        revenue = svc.fetch_revenue()
        return render_template(
            "dashboard.html",
            revenue=revenue,
            top_revenue=max((r.revenue for r in revenue), default=0),
            latest_invoices=svc.fetch_latest_invoices(),
            cards=svc.fetch_card_data(),
            active_page="dashboard",
        )
