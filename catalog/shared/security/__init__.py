"""HTTP security helpers: secure headers, rate limiting, password hashing."""
