# src/models/__init__.py

from .locations import *
# import every model file here
