# settings/__init__.py
# -*- coding: utf-8 -*-
"""
Configuration for the cljs-go bootstrap.
"""

from settings.config_loader import load_settings
from settings.config_models import BootstrapSettings

__all__ = ["BootstrapSettings", "load_settings"]
