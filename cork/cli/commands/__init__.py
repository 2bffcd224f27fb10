# cork/cli/commands/__init__.py
# Subcommand modules; each registers itself on the root app at import time
