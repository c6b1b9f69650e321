import multiprocessing
import os

# Entry point: gunicorn -c gunicorn.conf.py "app:create_app()"
wsgi_app = "app:create_app()"

# Bind / workers / threads
bind = os.getenv("BIND", "0.0.0.0:10000")
workers = int(os.getenv("WEB_CONCURRENCY", str(max(2, multiprocessing.cpu_count() // 2))))
threads = int(os.getenv("WEB_THREADS", "4"))

# Worker class & timeouts
# Discord gives an interaction 3s to answer; the worker timeout is the backstop
# for a hung upstream call, HTTP_TIMEOUT the first line.
worker_class = "gthread"
timeout = int(os.getenv("WEB_TIMEOUT", "30"))
graceful_timeout = int(os.getenv("WEB_GRACEFUL_TIMEOUT", "30"))
keepalive = int(os.getenv("WEB_KEEPALIVE", "5"))

# Logging
loglevel = os.getenv("LOG_LEVEL", "info")
accesslog = "-"   # stdout
errorlog = "-"    # stderr
capture_output = True

# Security / proxy
forwarded_allow_ips = "*"
proxy_protocol = False

# Preload so create_app() runs once in the master. Each worker then holds its
# own copy of the lookup caches.
preload_app = True

# The master must not start the registration thread before it forks; the first
# worker registers instead (see post_worker_init).
register_commands = os.getenv("REGISTER_COMMANDS", "true").strip().lower() in {"1", "true", "yes", "on"}
os.environ["REGISTER_COMMANDS"] = "false"

def post_fork(server, worker):
    server.log.info("Worker spawned (pid: %s)", worker.pid)

def when_ready(server):
    server.log.info("Gunicorn is ready. Spawning workers")

def worker_int(worker):
    worker.log.info("Worker received INT or QUIT signal")

def worker_abort(worker):
    worker.log.info("Worker received SIGABRT signal")

def post_worker_init(worker):
    # age 1 is the first worker spawned; replacements never re-register
    if register_commands and worker.age == 1:
        from app.config import load_settings
        from connectors.discord import register_in_background
        worker.log.info("Registering commands from worker %s", worker.pid)
        register_in_background(load_settings({"REGISTER_COMMANDS": True}))
