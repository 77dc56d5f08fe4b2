"""Local runner: `python main.py` (or `uvicorn countries_api.main:app`)."""
from __future__ import annotations

import os

import uvicorn

HOST = os.getenv("HOST", "127.0.0.1")
PORT = int(os.getenv("PORT", "8080"))


if __name__ == "__main__":
    print(f"Starting World Countries API at http://{HOST}:{PORT}")
    print(f"API documentation available at http://{HOST}:{PORT}/docs")
    uvicorn.run("countries_api.main:app", host=HOST, port=PORT, log_level=os.getenv("LOG_LEVEL", "info").lower())
