"""API module for Latex Free Eats.

- Validates inputs, reads/writes submissions through the store
- Joins glove summaries onto restaurants for the UI
- Forbidden: SQL queries, direct file access
"""
