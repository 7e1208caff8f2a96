"""
Task Tracker API - Tasks Module

Task CRUD on top of the shared mutation protocol.
"""
