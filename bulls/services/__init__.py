"""Service helpers for the bull registry: the record store and the importer."""
