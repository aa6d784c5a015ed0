# examples/__init__.py
"""
Patternbook examples package.

This package contains demonstration scripts showing how to use the patterns from your own code.
These are examples for learning, not tests for verification.

Available examples:
- basic_example.py: Memento, decorator, facade and futures outside the demo registry
"""
