from uuid import UUID

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from jose import JWTError

from ...application.interfaces import IUserContext
from ...infrastructure.security import decode_token

bearer = HTTPBearer(auto_error=False)


class UserContext(IUserContext):
    def __init__(self, user_id: UUID):
        self._user_id = user_id

    @property
    def user_id(self) -> UUID:
        return self._user_id


def get_user_context(
    creds: HTTPAuthorizationCredentials | None = Depends(bearer),
) -> UserContext:
    if creds is None:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Not authenticated")
    try:
        return UserContext(decode_token(creds.credentials))
    except JWTError:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid token")
