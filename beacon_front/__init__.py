"""
beacon_front — front headless WordPress rendu côté serveur (FastAPI).

Démarrer : uvicorn beacon_front.api.main:app --reload --port 3000
"""
__version__ = "0.3.0"
