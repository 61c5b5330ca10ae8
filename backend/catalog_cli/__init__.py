"""Typer command line interface for the Cinestream Catalog API."""
