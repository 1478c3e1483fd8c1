from .profile_descriptor import ProfileDescriptor
from .github_record import GithubProfileData, GithubRecord
from .lookup_result import LookupResult

__all__ = [
    "ProfileDescriptor",
    "GithubProfileData",
    "GithubRecord",
    "LookupResult",
]
