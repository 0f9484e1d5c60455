"""
➡️ But : Centraliser tous les paramètres configurables (nom d’app, chemin DB, URLs de profil, avatars, logs…)

Utilise pydantic-settings pour charger automatiquement les variables d’environnement (.env, variables système…).

Fournit un objet settings unique, que tu importes ailleurs :

from userfields.core.config import settings
print(settings.APP_NAME)


🔹 Avantages :

Plus propre que des constantes éparpillées dans le code.

Facilite le passage entre environnements (dev / prod / test).
"""

from typing import Optional

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # -----------------------------
    # App
    # -----------------------------
    APP_NAME: str = "User-Fields"
    ENV: str = "dev"  # dev | prod | test

    # -----------------------------
    # DB
    # -----------------------------
    SQLITE_PATH: str = "userfields.db"  # fichier SQLite
    # Si tu veux forcer une URL différente (ex: Postgres), définis DATABASE_URL dans l'env.
    DATABASE_URL: Optional[str] = None
    SEED_PATH: str = "userfields/db/seed_data.yaml"

    # -----------------------------
    # Profils / avatars
    # -----------------------------
    PROFILE_BASE_URL: str = "http://localhost:8080/profile"
    AVATAR_BASE_URL: str = "https://secure.gravatar.com/avatar"
    AVATAR_DEFAULT: str = "mm"        # image de repli (mm | identicon | retro | blank…)
    AVATAR_RATING: str = "g"          # g | pg | r | x
    AVATAR_DEFAULT_SIZE: int = 96     # en pixels

    # -----------------------------
    # Logs
    # -----------------------------
    LOG_LEVEL: str = "INFO"
    LOG_JSON: Optional[bool] = None   # auto selon ENV si None

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": True,
    }

    # -----------------------------
    # Post-process values
    # -----------------------------
    def model_post_init(self, __context): # appelée automatiquement
        # DATABASE_URL par défaut depuis SQLITE_PATH si non fourni
        if not self.DATABASE_URL:
            object.__setattr__(self, "DATABASE_URL", f"sqlite:///{self.SQLITE_PATH}")

        # Logs JSON auto: true en prod si non spécifié
        if self.LOG_JSON is None:
            object.__setattr__(self, "LOG_JSON", self.ENV == "prod")

        # Pas de slash final : les URLs sont construites avec "/" + slug
        object.__setattr__(self, "PROFILE_BASE_URL", self.PROFILE_BASE_URL.rstrip("/"))
        object.__setattr__(self, "AVATAR_BASE_URL", self.AVATAR_BASE_URL.rstrip("/"))


# Instance globale importable partout
settings = Settings()
