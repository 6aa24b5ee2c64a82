"""
markup-toggle: toggle inline markup tags around a selection in a rich-text tree.
"""

__version__ = "0.1.0"
