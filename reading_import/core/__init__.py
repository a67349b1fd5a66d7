# reading_import/core/__init__.py

"""Core domain layer: models, enums, errors and type definitions"""
