"""
handlers/dashboard_handler.py
-----------------------------
HTML dashboard of the frontend service.

Reads users and products from the API through ``ApiClient`` and renders
whatever arrived. A failed fetch hides its section; a failed users fetch
also shows "Error connecting to API service". The page itself always renders.
"""

import platform
import socket

from flask import Blueprint, current_app, render_template

from clients.api_client import ApiClient, FetchErrorKind
from models.product import Product
from models.user import User
from utils.logger import get_logger

logger = get_logger(__name__)

bp = Blueprint("dashboard", __name__, template_folder="templates")


@bp.route("/", methods=["GET"])
def dashboard():
    client: ApiClient = current_app.extensions["api_client"]

    users_result = client.get_path("/users")
    products_result = client.get_path("/products")

    users = [User.from_row(r) for r in users_result.data] if users_result.ok else None
    products = [Product.from_record(r) for r in products_result.data] if products_result.ok else None

    return render_template(
        "dashboard.html",
        hostname=socket.gethostname(),
        python_version=platform.python_version(),
        api_url=client.base_url,
        users=users,
        users_unreachable=users_result.error is FetchErrorKind.TRANSPORT,
        products=products,
    )
