"""
Cross-cutting concerns shared by every layer: error mapping,
logging setup and HTTP security helpers.
"""
