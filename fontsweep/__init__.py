"""
fontsweep package
- Inventory a directory tree (classify, filter, sort, summarize) and copy its font files into one flat directory.
"""
__all__ = ["cli", "config", "api", "walker", "classifier", "mime", "filters", "aggregate", "discover", "copier", "fontmeta", "report", "util", "types"]
__version__ = "0.1.0"
