"""Speckle adapters: graph traversal, reference data retrieval, Automate entry point."""
