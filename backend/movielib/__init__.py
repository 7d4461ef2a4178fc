"""
Movie Library API - Application Package
=======================================

What: Marks the `movielib` directory as a Python package.
Who:  Used by uvicorn (`uvicorn movielib.main:app`), pytest, and the `movielib`
      console script.

Architecture Note:

    ┌─────────────────────────────────────┐
    │           Routes (API Layer)        │  ← HTTP concerns only
    ├─────────────────────────────────────┤
    │        Services (In-Memory Stores)  │  ← Records and id counters
    ├─────────────────────────────────────┤
    │        Schemas (API Contracts)      │  ← Pydantic models
    └─────────────────────────────────────┘

    Routes parse ids, validate input and map outcomes to status codes.
    Stores own their records and never raise HTTP errors themselves.
    Nothing is persisted: every application instance starts empty.
"""

__version__ = "1.0.0"
