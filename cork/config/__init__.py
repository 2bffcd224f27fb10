# cork/config/__init__.py
# Settings & dev mode configuration
