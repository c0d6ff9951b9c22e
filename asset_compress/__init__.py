"""
asset-compress — build target resolution for concatenated JS/CSS assets.
"""

__version__ = "0.1.0"
