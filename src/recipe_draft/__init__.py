"""
Recipe Draft - recipe web page import.

Packages:
- recipe_import: fetch, HTML normalization, extraction, orchestration
- ingredients: ingredient normalization and food catalog matching
- classify: course category and difficulty classification
"""

__version__ = "0.1.0"
