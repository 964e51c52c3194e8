"""
Core utilities shared across the Series API: environment-driven settings and
logging setup.
"""
