from .profile_repo import ProfileRepositoryDB
from .round_repo import RoundRepositoryDB

__all__ = ["ProfileRepositoryDB", "RoundRepositoryDB"]
