# common/__init__.py
# -*- coding: utf-8 -*-
"""
Shared helpers for running external commands.
"""
