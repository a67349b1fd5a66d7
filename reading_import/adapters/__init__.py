# reading_import/adapters/__init__.py

"""Adapters exposing the import engine through the CLI and file exports"""
