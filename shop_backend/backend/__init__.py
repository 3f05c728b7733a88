# backend/__init__.py
