"""
HTTP API for projects, tasks and dashboard statistics.
"""
