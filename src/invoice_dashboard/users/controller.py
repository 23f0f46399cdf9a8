from __future__ import annotations

from flask import Flask, flash, redirect, render_template, request, url_for
from flask_login import current_user, login_user, logout_user

from ..container import Container
from ..core.exceptions import DataUnavailableError
from ..extensions import login_manager


def _safe_next(target: str | None) -> str | None:
    # Only same-site paths; "//host" would leave the site.
    if target and target.startswith("/") and not target.startswith("//"):
        return target
    return None


def register(app: Flask, container: Container) -> None:
    @login_manager.user_loader
    def load_user(user_id: str):
        return container.auth_service.load_principal(user_id)

    @app.route("/", endpoint="home")
    def home():
        if current_user.is_authenticated:
            return redirect(url_for("dashboard"))
        return redirect(url_for("login"))

    @app.route("/login", methods=["GET", "POST"], endpoint="login")
    def login():
        if current_user.is_authenticated:
            return redirect(url_for("dashboard"))

        if request.method == "POST":
            credentials = {
                "email": request.form.get("email", ""),
                "password": request.form.get("password", ""),
            }
            try:
                principal = container.auth_service.authorize(credentials)
            except DataUnavailableError:
                flash("Something went wrong.", "danger")
                return render_template("login.html", email=credentials["email"]), 500

            if principal is None:
                flash("Invalid credentials.", "danger")
                return render_template("login.html", email=credentials["email"]), 401

            login_user(principal, remember=bool(request.form.get("remember_me")))
            return redirect(_safe_next(request.args.get("next")) or url_for("dashboard"))

        return render_template("login.html")

    @app.route("/logout", methods=["POST"], endpoint="logout")
    def logout():
        logout_user()
        flash("Signed out.", "info")
        return redirect(url_for("login"))
