"""Access tokens and password hashing."""
