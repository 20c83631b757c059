"""
Utility functions used to normalize transaction fields.
"""
