"""
Use cases for the users API.

Routers call these services instead of reading or writing the JSON file.
"""
