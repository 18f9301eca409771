"""Catalog entities: Person and Book.

Each entity package keeps its wire model (``entity``), its table
(``table``) and its repository (``repository``) side by side.
"""
