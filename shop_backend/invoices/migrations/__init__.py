# invoices/migrations/__init__.py
