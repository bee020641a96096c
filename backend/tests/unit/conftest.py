"""Unit test configuration.

Unit tests build their collaborators directly (in-memory repositories,
AsyncMock ports) and never talk to MongoDB or the USDA API.
"""
