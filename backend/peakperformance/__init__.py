"""
PeakPerformance Backend — Application Package Initializer
==========================================================

What: Marks the `peakperformance` directory as a Python package.
Why:  Enables module imports like `from peakperformance.config import settings`.
Who:  Used implicitly by Python's import system and explicitly by pytest and uvicorn.

Architecture Note:
    The backend follows the same layered shape for every resource:

    ┌─────────────────────────────────────┐
    │           Routes (API Layer)        │  ← one router per resource, built by a factory
    ├─────────────────────────────────────┤
    │      ResourceService (Handlers)     │  ← validation, persistence, error mapping
    ├─────────────────────────────────────┤
    │       Models & Schemas (Data)       │  ← SQLAlchemy tables + Pydantic payloads
    ├─────────────────────────────────────┤
    │        Database (Persistence)       │  ← Injected async engine and sessions
    └─────────────────────────────────────┘

    Nine resources share this stack: surveys, invoices, inventory reports,
    inventory, notifications, orders, products, users and sales.
"""

__version__ = "1.0.0"
