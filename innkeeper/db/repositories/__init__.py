"""
Per-domain repository modules for database access.

Routes and services call these functions instead of building queries inline.
"""
