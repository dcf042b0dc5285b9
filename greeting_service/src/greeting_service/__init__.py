"""
Greeting Service - Hexagonal Architecture Example

Looks up a user's name through an outbound repository port and formats
a greeting, with a logging decorator adapter for observability.
"""

__version__ = "0.1.0"
__author__ = "Systems Engineering Portfolio"
