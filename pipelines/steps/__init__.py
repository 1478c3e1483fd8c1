# Namespace for pipeline steps
from .load_profiles import LoadProfiles  # noqa: F401
from .scrape_and_persist import ScrapeAndPersistProfiles  # noqa: F401
