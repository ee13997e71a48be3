# Middleware package init
"""
ContactBook Backend: Middleware Package
=======================================

Middleware Chain (order matters):
    Request → [Request ID] → [Logging] → [Wildcard CORS] → [CORS] → [Errors] → Route Handler

    1. Request ID: generate the correlation ID used by every later log line
    2. Logging: log method, path, status and duration with that ID
    3. Wildcard CORS: allow-any-origin headers on every response (CORS_ORIGINS=*)
    4. CORS: Starlette's CORSMiddleware (answers preflight OPTIONS requests)
    5. Errors: unhandled exceptions become a JSON 500

    Responses pass back through the chain in reverse, so the request ID and
    CORS headers are set on every response, including preflight answers and
    unexpected 500s.
"""
