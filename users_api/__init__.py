"""CRUD HTTP service over a JSON file of user records."""
