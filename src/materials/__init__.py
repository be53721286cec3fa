# materials/__init__.py
