# reading_import/infrastructure/__init__.py

"""Infrastructure layer: configuration, caching, logging and persistence"""
