# Gunicorn configuration for the Job Board API
#   gunicorn jobboard.main:app -c gunicorn.conf.py
import os

# Bind to the port provided by the host
bind = f"0.0.0.0:{os.getenv('PORT', '10000')}"

# Small instances: keep the worker count low
workers = int(os.getenv("WEB_CONCURRENCY", "2"))

# FastAPI is ASGI, so run uvicorn inside gunicorn
worker_class = "uvicorn.workers.UvicornWorker"

timeout = 60

# Graceful timeout
graceful_timeout = 30

# Keep alive
keepalive = 5

# Log level
loglevel = os.getenv("LOG_LEVEL", "info").lower()

# Access log
accesslog = "-"

# Error log
errorlog = "-"
