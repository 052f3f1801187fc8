"""HTTP API (FastAPI) over the awards dashboard core."""
