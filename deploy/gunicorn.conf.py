"""
Gunicorn configuration for the JavaMaster storefront API.

    gunicorn storefront.main:app -c deploy/gunicorn.conf.py
"""
import os
import multiprocessing

# Server socket
bind = f"{os.environ.get('HOST', '0.0.0.0')}:{os.environ.get('PORT', '8000')}"
backlog = 2048

# Worker processes
workers = int(os.environ.get("WEB_CONCURRENCY", multiprocessing.cpu_count() * 2 + 1))
worker_class = "uvicorn.workers.UvicornWorker"
worker_connections = 1000
# Checkout holds a request open for the simulated payment delay
timeout = 60
keepalive = 5

# Logging (stdout/stderr unless a log dir is given)
_log_dir = os.environ.get("LOG_DIR")
accesslog = os.path.join(_log_dir, "gunicorn_access.log") if _log_dir else "-"
errorlog = os.path.join(_log_dir, "gunicorn_error.log") if _log_dir else "-"
loglevel = os.environ.get("LOG_LEVEL", "info").lower()
access_log_format = '%(h)s %(l)s %(u)s %(t)s "%(r)s" %(s)s %(b)s "%(f)s" "%(a)s" %(D)s'

# Process naming
proc_name = "javamaster-storefront"

# Server mechanics
daemon = False
pidfile = "/tmp/storefront-gunicorn.pid"

# Security
limit_request_line = 4094
limit_request_fields = 100
limit_request_field_size = 8190


def when_ready(server):
    """Called just after the server is started."""
    server.log.info(f"Storefront API ready with {workers} workers on {bind}")


def worker_int(worker):
    """Called when a worker receives SIGINT or SIGQUIT."""
    worker.log.info(f"Worker {worker.pid} interrupted")
