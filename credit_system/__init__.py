"""
Credit Application System

A FastAPI-based service for registering customers and managing
their credit applications.
"""

__version__ = "0.1.0"
