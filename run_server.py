"""
Start the recommendation proxy locally.

Prints the available endpoints and runs uvicorn on PORT (default 5000).
"""

import uvicorn

from recommendation_proxy.config import Settings

if __name__ == "__main__":
    settings = Settings.from_env()
    base_url = f"http://localhost:{settings.port}"

    print("=" * 60)
    print("Starting Recommendation Proxy")
    print("=" * 60)
    print()
    print("📌 API Endpoints:")
    print(f"   - Health Check:    GET  {base_url}/health")
    print(f"   - Recommendation:  POST {base_url}/api/get-recommendation")
    if settings.enable_diagnostics:
        print(f"   - Diagnostics:     GET  {base_url}/test")
        print(f"                      POST {base_url}/api/simple-test")
    print(f"   - API Docs:             {base_url}/docs")
    print()
    print("📝 Test with curl:")
    print(f'   curl -X POST "{base_url}/api/get-recommendation" \\')
    print('     -H "Content-Type: application/json" \\')
    print('     -d \'{"prompt": "Tell me a joke"}\'')
    print()
    print("=" * 60)

    uvicorn.run(
        "recommendation_proxy.main:app",
        host="0.0.0.0",
        port=settings.port,
        reload=not settings.is_production(),
        log_level=settings.log_level.lower()
    )
