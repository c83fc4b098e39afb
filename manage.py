#!/usr/bin/env python
import os
import sys
import logging

# ---------------------------------------------------------
# 🔒 SSL Gateway — manage.py
# Purpose: Django management entry point with environment safety.
# ---------------------------------------------------------

def main():
    """Run administrative tasks."""
    os.environ.setdefault("DJANGO_SETTINGS_MODULE", "ssl_gateway.settings")
    os.environ.setdefault("DJANGO_ENV", "local")

    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s [INFO] %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S"
    )

    https_host = os.getenv("REQUIRE_SSL_HTTPS_HOST") or "(from first request)"
    http_host = os.getenv("REQUIRE_SSL_HTTP_HOST") or "(from first request)"
    remain = os.getenv("REQUIRE_SSL_REMAIN_IN_SSL", "0")
    logging.info(f"🔒 RequireSSL | https: {https_host} | http: {http_host} | remain_in_ssl: {remain}")

    try:
        from django.core.management import execute_from_command_line
    except ImportError as exc:
        raise ImportError(
            "Couldn't import Django. Are you sure it's installed and "
            "available on your PYTHONPATH environment variable? Did you "
            "forget to activate a virtual environment?"
        ) from exc

    execute_from_command_line(sys.argv)


if __name__ == "__main__":
    main()
