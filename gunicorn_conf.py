import multiprocessing
import os

# Gunicorn configuration for the users/posts API
# Run with: gunicorn -c gunicorn_conf.py app.main:app

bind = os.getenv("BIND", "0.0.0.0:8000")

# (2 x num_cores) + 1, overridable for small containers
workers = int(os.getenv("WEB_CONCURRENCY", multiprocessing.cpu_count() * 2 + 1))
worker_class = "uvicorn.workers.UvicornWorker"

timeout = 60
keepalive = 5

# Logging
accesslog = "-"
errorlog = "-"
loglevel = os.getenv("LOG_LEVEL", "info").lower()

proc_name = "users_posts_api"
reload = False
