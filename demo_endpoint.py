"""
Run the paramcoerce API locally with auto-reload.

    python demo_endpoint.py
    curl -X POST http://localhost:8000/parameters/parse \
      -H "Content-Type: application/json" \
      -d '{"name": "Test", "schema": {"type": "integer", "format": "int32"}, "value": "2147483648"}'
"""

import uvicorn

if __name__ == "__main__":
    uvicorn.run(
        "paramcoerce.main:app",
        host="0.0.0.0",
        port=8000,
        reload=True,
        log_level="info"
    )
