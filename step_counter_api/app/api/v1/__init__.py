"""
Version 1 of the API.

Bundles the team, counter and health endpoints.
"""
