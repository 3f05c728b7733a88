# payments/migrations/__init__.py
