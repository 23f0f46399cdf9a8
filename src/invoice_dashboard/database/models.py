from ..core.enums import InvoiceStatus
from ..extensions import db


class Customer(db.Model):
    __tablename__ = "customers"

    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(255), nullable=False)
    email = db.Column(db.String(255), nullable=False)
    image_url = db.Column(db.String(255), nullable=False, default="")

    invoices = db.relationship("Invoice", back_populates="customer", lazy=True)


class Invoice(db.Model):
    __tablename__ = "invoices"
    __table_args__ = (
        db.CheckConstraint("amount >= 0", name="ck_invoices_amount_non_negative"),
        db.CheckConstraint(
            f"status IN ('{InvoiceStatus.PENDING.value}', '{InvoiceStatus.PAID.value}')",
            name="ck_invoices_status",
        ),
    )

    id = db.Column(db.Integer, primary_key=True)
    customer_id = db.Column(db.Integer, db.ForeignKey("customers.id"), nullable=False, index=True)
    amount = db.Column(db.Integer, nullable=False)  # cents
    status = db.Column(db.String(20), nullable=False)
    date = db.Column(db.Date, nullable=False, index=True)

    customer = db.relationship("Customer", back_populates="invoices")


class User(db.Model):
    __tablename__ = "users"

    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(255), nullable=False)
    email = db.Column(db.String(255), unique=True, nullable=False)
    password = db.Column(db.String(255), nullable=False)  # werkzeug hash, never plaintext


class Revenue(db.Model):
    """Monthly revenue buckets, written by the seed process only."""

    __tablename__ = "revenue"

    id = db.Column(db.Integer, primary_key=True)
    month = db.Column(db.String(4), unique=True, nullable=False)
    revenue = db.Column(db.Integer, nullable=False)
