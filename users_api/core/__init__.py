"""
Core utilities shared across the users API: settings and logging setup.
"""
