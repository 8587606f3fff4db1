"""
Core domain models, mathematical primitives, and contracts.

This module contains the foundational building blocks of the calculator that
are independent of any host (UI toolkit, keyboard layer, storage backend).
"""
