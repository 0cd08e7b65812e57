"""Greeting service package.

Holds the FastAPI routes, the greeting use case, and the listener that serves
them. The application factory lives in the top-level ``main`` module.
"""
