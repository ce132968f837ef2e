"""Bull registry application for Herdbook.

This package contains the model, record store, spreadsheet importer,
views and templates for managing bull breeding records.
"""
