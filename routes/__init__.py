"""
Player Data Manager - Routes Package

Contains the FastAPI routers mounted by server.py.
"""
