"""
Core domain models and the arithmetic engine.

This module contains the foundational building blocks that are independent
of external collaborators (files, terminals, etc.).
"""
