# cork/core/__init__.py
# Pure timekeeping core: engine, tick scheduling, formatting & errors (no console I/O)
