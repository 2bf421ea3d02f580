# launcher/core/__init__.py
