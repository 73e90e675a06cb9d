"""
Infrastructure adapters for the catalog bounded context.
"""
