"""Dataset persistence layer.

This module serializes records and writes updated dataset files.
"""
