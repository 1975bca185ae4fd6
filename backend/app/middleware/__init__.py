# Middleware package init
"""
Notes API Backend: Middleware Package
=====================================

Middleware Chain:
    Request → [Request ID] → [Logging] → [CORS] → Route Handler

    1. Request ID: assign a correlation id and expose it to loggers
    2. Logging:    one access-log line per request, tagged with that id
    3. CORS:       FastAPI's CORSMiddleware answers preflights and adds headers

Responses travel back through the same chain in reverse, which is where the
X-Request-ID header and the request duration are added.
"""
