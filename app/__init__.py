# app/__init__.py
"""
Dealership car stock package.

The FastAPI application lives in app.main:
    uvicorn app.main:app --reload
"""
