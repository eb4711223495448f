"""Content gateway access.

This module resolves content identifiers into metadata documents
through an HTTP retrieval gateway.
"""
