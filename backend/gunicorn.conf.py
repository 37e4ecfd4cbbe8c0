import os

# Application
wsgi_app = "watchlist_api:create_app()"

# Bind & workers
bind = os.getenv("GUNICORN_BIND", "0.0.0.0:8000")
# Each worker owns its own session store; refresh tokens are not shared
workers = int(os.getenv("GUNICORN_WORKERS", "1"))
threads = int(os.getenv("GUNICORN_THREADS", "4"))
timeout = 60
graceful_timeout = 30
keepalive = 5

# Logs to stdout/stderr
accesslog = "-"
errorlog = "-"
loglevel = os.getenv("LOG_LEVEL", "info").lower()

forwarded_allow_ips = "*"
proxy_protocol = False
