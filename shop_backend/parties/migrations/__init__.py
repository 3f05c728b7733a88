# parties/migrations/__init__.py
