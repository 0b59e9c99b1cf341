"""
Utility helpers: date handling and PDF rendering.
"""
