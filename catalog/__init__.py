"""Catalog: domain core for a content catalog system."""
