# launcher/app/__init__.py
