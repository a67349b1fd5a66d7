# reading_import/application/__init__.py

"""Application layer: normalization, matching and import services"""
