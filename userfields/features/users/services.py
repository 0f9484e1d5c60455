"""
➡️ But : Logique métier des utilisateurs et rendu de leur avatar.

UserService : vérifie l'existence des utilisateurs et lève des HTTPException
pour informer proprement le client.
"""

from fastapi import HTTPException, status
from userfields.db.repositories.users import UserRepository
from userfields.db.models.users import User
from userfields.features.profiles.avatar import AvatarContext, render_avatar

class UserService:
    def __init__(self, repo: UserRepository):
        self.repo = repo

    def get(self, user_id: int) -> User:
        user = self.repo.get(user_id)
        if not user:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found")
        return user

    def create(self, username: str, email: str = "", display_name: str | None = None) -> User:
        if self.repo.get_by_username(username):
            raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail="Username already taken")
        return self.repo.create(
            username=username,
            email=email.strip(),
            display_name=display_name,
        )

    def avatar_html(self, user_id: int, size: int) -> str:
        user = self.get(user_id)
        return render_avatar(AvatarContext(user=user, size=size))
