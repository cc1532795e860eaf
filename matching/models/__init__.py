from .user import User
from .company import Company, CompanyMember
from .job_post import Profession, JobPost, Video
from .like import Like
from .company_like import CompanyLike
from .match import Match, Chat

__all__ = [
    "User",
    "Company",
    "CompanyMember",
    "Profession",
    "JobPost",
    "Video",
    "Like",
    "CompanyLike",
    "Match",
    "Chat",
]
