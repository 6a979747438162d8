"""
Command-line interfaces for the conversion toolkit.
"""
