"""
Task Tracker API - Users Module

User records (the credential store) and the user resource endpoints.
"""
