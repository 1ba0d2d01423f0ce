"""Domain-level vocabulary and business rules.

This package contains logic that defines *what* a POS is and how raw input
maps onto it, independent from *where* it is stored or exposed.
"""
