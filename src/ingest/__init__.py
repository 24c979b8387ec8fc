"""Input reading and conversion orchestration.

This package loads the input CSV tables and runs the conversion
pipeline that produces carrier label files.
"""
