"""Single-route greeting API served with FastAPI and uvicorn."""
