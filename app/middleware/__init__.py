"""
Products API: Middleware Package
================================

Middleware Chain:
    Request → [Request ID] → [Logging] → [CORS] → Route Handler

    - Request ID first, so the access log line carries the correlation ID
    - Logging measures everything below it, including the route and database
"""
