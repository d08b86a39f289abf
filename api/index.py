"""
Nettbutikk - Main FastAPI Application

Single entry point for the shop API. Run with:
    uvicorn api.index:app
"""
from nettbutikk.app import create_app

app = create_app(preload_catalog=True)
