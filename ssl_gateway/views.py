import logging

from django.contrib import messages
from django.shortcuts import redirect, render

from requiressl.decorators import ssl_required
from requiressl.shortcuts import require_ssl

logger = logging.getLogger(__name__)


def index(request):
    return render(request, "page.html", {"title": "Home"})


def about(request):
    return render(request, "page.html", {"title": "About"})


def login_view(request):
    """Login form; secured by calling require_ssl from inside the view."""
    response = require_ssl(request)
    if response is not None:
        return response

    if request.method == "POST":
        username = request.POST.get("username", "").strip()
        if username:
            request.session["username"] = username
            messages.success(request, f"Welcome, {username}!")
            logger.info(f"✅ {username} logged in")
            return redirect("cart")
        messages.error(request, "Please enter a username.")

    return render(request, "page.html", {"title": "Login", "show_login_form": True})


@ssl_required
def cart(request):
    return render(
        request,
        "page.html",
        {"title": "Cart", "username": request.session.get("username")},
    )
