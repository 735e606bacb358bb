"""Gunicorn config for container deployment."""
import os

# Bind to the platform's PORT or default 8000
bind = f"0.0.0.0:{os.environ.get('PORT', '8000')}"

# Datasets live in process memory, so every worker keeps its own store.
# Keep a single worker unless uploads are routed with sticky sessions.
worker_class = "uvicorn.workers.UvicornWorker"
workers = int(os.environ.get("WEB_CONCURRENCY", "1"))

# Timeout: allow up to 120s for parsing large spreadsheet uploads
timeout = 120

# Graceful timeout for shutdown
graceful_timeout = 30

keepalive = 65

# Logging
accesslog = "-"
errorlog = "-"
loglevel = "info"
