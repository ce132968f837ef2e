"""Management package for custom Django admin commands.

This package exposes the ``import_bulls`` command used to load bull
records from an Excel workbook.
"""
