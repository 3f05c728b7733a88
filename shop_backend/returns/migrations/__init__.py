# returns/migrations/__init__.py
