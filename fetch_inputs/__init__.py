from .cookies import CookieStore, find_profile_dir, get_session_cookie
from .errors import (
    CookieStoreError,
    FetchError,
    FetchInputsError,
    HomeDirectoryError,
    ProfileNotFoundError,
    SessionError,
)
from .fetch import FetchOutcome, fetch_all, fetch_input, input_path, input_url

__version__ = "0.1.0"

__all__ = [
    "CookieStore",
    "CookieStoreError",
    "FetchError",
    "FetchInputsError",
    "FetchOutcome",
    "HomeDirectoryError",
    "ProfileNotFoundError",
    "SessionError",
    "fetch_all",
    "fetch_input",
    "find_profile_dir",
    "get_session_cookie",
    "input_path",
    "input_url",
]
