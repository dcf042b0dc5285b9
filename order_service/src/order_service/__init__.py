"""
Order Service - Hexagonal Architecture Example

Product catalog, per-user carts and order placement composed from
pluggable repository and notifier ports.
"""

__version__ = "0.1.0"
__author__ = "Systems Engineering Portfolio"
