"""
HTTP API layer for graymap
"""
