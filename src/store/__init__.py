"""Output file layer.

This package writes carrier label files and input templates
to the configured output directory.
"""
