"""
Example: API Server

Demonstrates running the FastAPI server for URL and domain decomposition.

Start the server and query it:
```bash
# Start the server
python examples/api_server.py

# In another terminal, query the API:
curl "http://localhost:8000/v1/parse?url=https://www.example.co.uk/a?b=1"
curl http://localhost:8000/v1/domain/www.city.kawasaki.jp
curl "http://localhost:8000/v1/join?base=http://example.com/a&ref=/b"
```
"""

import logging

# Configure logging
logging.basicConfig(
    level=logging.INFO, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)


def main():
    """Run the API server."""
    import uvicorn

    from urlparts.api.server import app
    from urlparts.config import get_config

    config = get_config()

    print("=" * 80)
    print("Starting urlparts API Server")
    print("=" * 80)
    print()
    print(f"The server will start on http://{config.api.host}:{config.api.port}")
    print()
    print("API Endpoints:")
    print("  GET /                         - Health check")
    print("  GET /v1/parse?url=...         - All parts of a URL")
    print("  GET /v1/domain/{host}         - Public suffix / registrable domain")
    print("  GET /v1/join?base=...&ref=... - Merge ref over base")
    print()
    print("=" * 80)
    print()

    uvicorn.run(app, host=config.api.host, port=config.api.port, log_level="info")


if __name__ == "__main__":
    main()
