from .lookup import ProfileLookupPort
from .repos import RecordsRepoPort
from .source import ProfileSourcePort

__all__ = [
    "ProfileLookupPort",
    "RecordsRepoPort",
    "ProfileSourcePort",
]
