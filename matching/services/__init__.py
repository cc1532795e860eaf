from .match_engine import MatchEngine
from .likes import LikeService
from .company_likes import CompanyLikeService
from .matches import MatchService
from .candidates import Candidate, CandidateAggregator

__all__ = [
    "MatchEngine",
    "LikeService",
    "CompanyLikeService",
    "MatchService",
    "Candidate",
    "CandidateAggregator",
]
