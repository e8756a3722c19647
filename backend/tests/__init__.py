"""
Pytest test suite for The Fruit Union backend.

Test categories:
- Unit tests: services, commands and helpers against an in-memory gateway
- API tests: the FastAPI app over httpx ASGITransport with dependency overrides
- Gateway tests: request building checked through httpx.MockTransport
"""
