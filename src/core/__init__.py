"""
Core arbitrary-precision arithmetic, text stream I/O, and contracts.

This module contains the foundational building blocks that are independent
of external systems (files, services, etc.).
"""
