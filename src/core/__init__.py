"""
Core domain models, arithmetic primitives, and contracts.

This module contains the foundational building blocks that are independent
of any caller surface (pages, routers, HTTP handlers, etc.).
"""
