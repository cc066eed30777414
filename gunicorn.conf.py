"""
Gunicorn configuration for Prompt Studio production deployment.

Usage:
    gunicorn prompt_studio.main:app -c gunicorn.conf.py
"""

import multiprocessing

# Bind to all interfaces on port 8000
bind = "0.0.0.0:8000"

# Worker processes: CPU cores * 2 + 1 (Gunicorn recommendation)
workers = multiprocessing.cpu_count() * 2 + 1

# Use Uvicorn's ASGI worker for FastAPI
worker_class = "uvicorn.workers.UvicornWorker"

# Request timeout (seconds)
timeout = 30

# Keep-alive connections (seconds)
keepalive = 5

# Logging
accesslog = "-"  # stdout
errorlog = "-"   # stderr
loglevel = "info"



def on_starting(server):
    """Seed empty prompt stores once in the master, before workers fork."""
    from prompt_studio.config import get_settings
    from prompt_studio.db.session import engine
    from prompt_studio.main import seed_prompt_stores

    if get_settings().prompt_seed_on_startup:
        seed_prompt_stores()
    # Workers must not inherit the master's pooled connections
    engine.dispose()
