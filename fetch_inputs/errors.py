class FetchInputsError(Exception):
    __slots__ = ()


class SessionError(FetchInputsError):
    __slots__ = ()


class HomeDirectoryError(SessionError):
    __slots__ = ()


class ProfileNotFoundError(SessionError):
    __slots__ = ()


class CookieStoreError(SessionError):
    __slots__ = ()


class FetchError(FetchInputsError):
    __slots__ = ()
