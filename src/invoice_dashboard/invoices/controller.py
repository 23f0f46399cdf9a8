from __future__ import annotations

from flask import Flask, flash, redirect, render_template, request, url_for
from flask_login import login_required

from ..common.web import no_store, parse_page
from ..container import Container
from ..core.enums import InvoiceStatus
from ..core.exceptions import DataUnavailableError, NotFoundError, ValidationError


def register(app: Flask, container: Container) -> None:
    def _invoice_not_found():
        return render_template("not_found.html", message="Could not find the requested invoice."), 404

    def _render_form(*, invoice=None, values=None, errors=None, message=None, status_code=200):
        return (
            render_template(
                "invoices/form.html",
                invoice=invoice,
                values=values or {},
                errors=errors or {},
                message=message,
                customers=container.customer_service.list_all(),
                statuses=list(InvoiceStatus),
                active_page="invoices",
            ),
            status_code,
        )

    @app.route("/dashboard/invoices", endpoint="invoices")
    @no_store
    @login_required
    def invoices():
        query = request.args.get("query", "")
        page = parse_page(request.args.get("page"))
        svc = container.invoice_service
        return render_template(
            "invoices/list.html",
            invoices=svc.search(query, page),
            total_pages=svc.count_pages(query),
            page=page,
            query=query,
            active_page="invoices",
        )

    @app.route("/dashboard/invoices/create", methods=["GET", "POST"], endpoint="create_invoice")
    @no_store
    @login_required
    def create_invoice():
        if request.method == "POST":
            try:
                container.invoice_service.create_invoice(request.form)
                flash("Invoice created.", "success")
                return redirect(url_for("invoices"))
            except ValidationError as e:
                return _render_form(values=request.form, errors=e.errors, message=e.message, status_code=400)
            except DataUnavailableError as e:
                return _render_form(values=request.form, message=str(e), status_code=500)

        return _render_form()

    @app.route("/dashboard/invoices/<int:invoice_id>/edit", methods=["GET", "POST"], endpoint="edit_invoice")
    @no_store
    @login_required
    def edit_invoice(invoice_id: int):
        invoice = container.invoice_service.get_form(invoice_id)
        if invoice is None:
            return _invoice_not_found()

        if request.method == "POST":
            try:
                container.invoice_service.update_invoice(invoice_id, request.form)
                flash("Invoice updated.", "success")
                return redirect(url_for("invoices"))
            except ValidationError as e:
                return _render_form(
                    invoice=invoice, values=request.form, errors=e.errors, message=e.message, status_code=400
                )
            except NotFoundError:
                return _invoice_not_found()
            except DataUnavailableError as e:
                return _render_form(invoice=invoice, values=request.form, message=str(e), status_code=500)

        values = {"customer_id": invoice.customer_id, "amount": invoice.amount, "status": invoice.status.value}
        return _render_form(invoice=invoice, values=values)

    @app.route("/dashboard/invoices/<int:invoice_id>/delete", methods=["POST"], endpoint="delete_invoice")
    @login_required
    def delete_invoice(invoice_id: int):
        try:
            container.invoice_service.delete_invoice(invoice_id)
            flash("Deleted Invoice.", "success")
        except NotFoundError:
            flash("Invoice not found.", "warning")
        except DataUnavailableError as e:
            flash(str(e), "danger")
        return redirect(url_for("invoices"))
