from fastapi import Request
from database.db_manager import DatabaseManager
from scoring import HandicapIndexCalculator


def get_db(request: Request) -> DatabaseManager:
    """FastAPI dependency that provides the DatabaseManager."""
    return request.app.state.db_manager


def get_calculator(request: Request) -> HandicapIndexCalculator:
    """FastAPI dependency that provides the handicap index calculator."""
    return request.app.state.handicap_calculator
