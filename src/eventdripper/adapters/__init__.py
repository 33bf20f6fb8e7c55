"""Adapters – HTTP client for the Event Dripper API and FastAPI receiver helpers."""
