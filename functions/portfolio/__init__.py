"""
Backend package for the portfolio site.

This package provides a FastAPI application serving the project catalog,
the contact form endpoint and aggregated competitive-programming stats.
"""
