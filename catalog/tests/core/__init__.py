"""Unit tests for core domain logic.

These tests exercise the Category aggregate and the validation rules
without external dependencies.
"""
