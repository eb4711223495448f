"""Dataset update pipeline.

This module reads the record store and drives the image id update pass.
It hands finished records to the store layer for persistence.
"""
