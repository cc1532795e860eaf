from .likes_repo import LikesRepo
from .company_likes_repo import CompanyLikesRepo
from .matches_repo import MatchesRepo

__all__ = ["LikesRepo", "CompanyLikesRepo", "MatchesRepo"]
