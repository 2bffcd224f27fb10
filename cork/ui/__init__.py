# cork/ui/__init__.py
# Terminal UI: theming, Rich renderables & the interactive stopwatch session
