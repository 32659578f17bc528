"""Product catalog service.

Product CRUD and catalog seeding on top of async SQLAlchemy.
"""
