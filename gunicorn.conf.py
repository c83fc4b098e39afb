import os

wsgi_app = "ssl_gateway.wsgi:application"

# Address & Port
bind = "0.0.0.0:{}".format(os.environ.get("PORT", "8000"))

# Worker settings: one thread per request, request state never shared
workers = 2
threads = 2
worker_class = "gthread"

# Timeouts
timeout = 120
graceful_timeout = 30

# TLS is terminated by the proxy in front; trust its scheme header
forwarded_allow_ips = os.environ.get("FORWARDED_ALLOW_IPS", "127.0.0.1")
secure_scheme_headers = {"X-FORWARDED-PROTO": "https"}

# Performance
preload_app = True
max_requests = 1000
max_requests_jitter = 50

# Logging
accesslog = "-"
errorlog = "-"
loglevel = "info"
