"""
Service layer.

Business state and logic live here, independent of the HTTP layer, so
they can be exercised directly in tests.
"""
