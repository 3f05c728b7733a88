# products/migrations/__init__.py
