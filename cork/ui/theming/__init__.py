# cork/ui/theming/__init__.py
# Theming utilities: colors, console theme & styled output helpers
