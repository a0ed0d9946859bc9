"""
FastAPI routers for all API endpoints.

- recommendations: POST /api/get-recommendation
- health: GET /health
- diagnostics: GET /test, POST /api/simple-test (optional)
- frontend: static bundle and HTML fallback (production only)
"""
