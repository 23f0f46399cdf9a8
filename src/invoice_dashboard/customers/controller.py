from __future__ import annotations

from flask import Flask, render_template, request
from flask_login import login_required

from ..common.web import no_store
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/dashboard/customers", endpoint="customers")
    @no_store
    @login_required
    def customers():
        query = request.args.get("query", "")
        rows = container.customer_service.search_with_totals(query)
        return render_template("customers.html", customers=rows, query=query, active_page="customers")
