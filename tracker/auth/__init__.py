"""
Task Tracker API - Authentication Module

Register/login with bcrypt password hashing and JWT bearer tokens.
"""
