"""Surface HTTP (FastAPI) — voir main.create_app."""
