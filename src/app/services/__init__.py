"""Serviços de aplicação.

Unidades de orquestração sobre os protocolos (sem IO direto).
Implementações concretas de IO ficam em app/infra/.
"""

from app.services.auth_service import AuthService, AuthSession, Principal
from app.services.catalog import AdminOperations, CatalogQueries, NomineeView
from app.services.guess_service import GuessService
from app.services.scoring_engine import ScoringEngine, count_correct
from app.services.visibility_gate import VisibilityGate

__all__ = [
    "AdminOperations",
    "AuthService",
    "AuthSession",
    "CatalogQueries",
    "GuessService",
    "NomineeView",
    "Principal",
    "ScoringEngine",
    "VisibilityGate",
    "count_correct",
]
