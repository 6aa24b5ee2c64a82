"""
Command-line interface for markup-toggle.
"""
