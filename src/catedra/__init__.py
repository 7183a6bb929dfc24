"""Catedra - profesor account registration and login service.

Layers:
- domain: Profesor identity record, store interface, domain exceptions
- application: registration and login flows
- infrastructure: SQLAlchemy persistence
- presentation: FastAPI HTTP API and Typer CLI
"""
