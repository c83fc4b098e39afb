from django.urls import path

from ssl_gateway import views

urlpatterns = [
    # ---------------- Plain pages (sent back to HTTP) ----------------
    path("", views.index, name="index"),
    path("about/", views.about, name="about"),

    # ---------------- SSL pages ----------------
    path("login/", views.login_view, name="login"),
    path("cart/", views.cart, name="cart"),
]
