"""
Detect which server is running the project.

Django's development servers (``runserver``, ``testserver`` and
django-extensions' ``runserver_plus`` without a certificate) cannot
terminate TLS, so redirecting to HTTPS under them only produces a
broken page.
"""
import os
import sys

from .conf import get_setting

TLS_INCAPABLE_ENGINES = frozenset({"runserver", "testserver", "runserver_plus"})

DEV_SERVER_COMMANDS = ("runserver", "testserver", "runserver_plus")
CERT_OPTIONS = ("--cert-file", "--cert")


def current_engine(argv=None):
    engine = get_setting().get("engine")
    if engine:
        return engine

    argv = sys.argv if argv is None else argv
    if not argv:
        return "wsgi"

    program = os.path.basename(argv[0])
    if program.startswith("gunicorn"):
        return "gunicorn"

    if len(argv) > 1 and argv[1] in DEV_SERVER_COMMANDS:
        command = argv[1]
        if command == "runserver_plus" and any(arg.startswith(CERT_OPTIONS) for arg in argv[2:]):
            return "runserver_plus+tls"
        return command

    return "wsgi"
