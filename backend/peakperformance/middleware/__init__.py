# Middleware package init
"""
PeakPerformance Backend — Middleware Package
==============================================

What:  Cross-cutting concerns applied to every request.

Middleware Chain (order matters!):
    Request → [Access: request ID + access log] → [GZip] → [CORS] → Route Handler

    1. Access: assign a correlation ID, time the request, write one log line
    2. GZip: compress responses over 500 bytes (large resource listings)
    3. CORS: Applied by FastAPI's CORSMiddleware (handles preflight)

The generic 500 handler for unexpected exceptions runs outside this chain.
"""
