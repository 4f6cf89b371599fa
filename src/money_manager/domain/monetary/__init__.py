"""Monetary domain package.

This package contains classes for handling monetary amounts and currencies,
including the Currency identifier, Money calculations with arbitrary
precision arithmetic, and the process-wide default precision.
"""
