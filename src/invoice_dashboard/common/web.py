from __future__ import annotations

from functools import wraps

from flask import make_response


def no_store(view):
    """Mark a view's response as uncacheable so figures are read fresh on every request."""

    @wraps(view)
    def wrapper(*args, **kwargs):
        response = make_response(view(*args, **kwargs))
        response.headers["Cache-Control"] = "no-store"
        return response

    return wrapper


def parse_page(value) -> int:
    try:
        page = int(value)
    except (TypeError, ValueError):
        return 1
    return page if page >= 1 else 1
