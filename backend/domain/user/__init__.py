"""User domain module.

Accounts (credentials and profile fields) and the cards each user saves.
"""
