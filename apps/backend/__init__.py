"""Resonance API service: FastAPI app (api/), registry service (services/),
shared pydantic models (schemas/), errors and utilities (core/), CLI (cli/).
"""
