"""Test suite for the catalog.

Organized into two categories:

1. core/: Unit tests for core domain logic
   - No external dependencies, fast execution
   - Uses seeded data generators from fixtures/

2. fixtures/: Deterministic test data generators
   - Seeded replacements for randomized fake-data libraries
   - Shared by core tests and entry point tests
"""
