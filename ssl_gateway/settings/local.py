from .base import *

DEBUG = True

# runserver_plus can serve TLS with --cert-file, plain runserver cannot
INSTALLED_APPS += ["django_extensions"]
