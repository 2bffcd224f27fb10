# cork/__init__.py
# Cork: stopwatch, lap splits & countdown timer for the terminal

__version__ = "0.1.0"
