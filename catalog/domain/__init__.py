"""
Domain layer package.

Pure business objects, port interfaces and errors.
No framework or infrastructure imports allowed.
"""
