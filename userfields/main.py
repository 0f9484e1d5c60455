"""
➡️ But : assembler toutes les pièces du puzzle.

Crée l’instance FastAPI (app).

Configure :

CORS (autorisations de qui peut appeler ces API)

titre, version, tags

schéma OpenAPI personnalisé

Inclut les routers (ex : /api/v1/field-groups).

Initialise les logs et la base SQLite au démarrage.

Point unique d’exécution : uvicorn userfields.main:app --reload.
"""

import structlog
import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from userfields.core.config import settings
from userfields.core.logs import configure_logging
from userfields.core.openapi import custom_openapi
from userfields.db.session import init_db

from userfields.api.v1.routers import field_groups, field_types, users

log = structlog.get_logger(__name__)


app = FastAPI(
    title=settings.APP_NAME,
    version="0.1.0",
    openapi_tags=[
        {"name": "field-groups", "description": "Groupes de champs de profil"},
        {"name": "field-types", "description": "Types de champs enregistrés"},
        {"name": "users", "description": "Utilisateurs et avatars"},
    ],
)

# CORS (ajustez selon vos besoins)
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"], allow_credentials=True,
    allow_methods=["*"], allow_headers=["*"],
)

# Routers
app.include_router(field_groups.router, prefix="/api/v1")
app.include_router(field_types.router, prefix="/api/v1")
app.include_router(users.router, prefix="/api/v1")

# Génération du schéma OpenAPI custom
app.openapi = lambda: custom_openapi(app)

# Démarrage
@app.on_event("startup")
def on_startup():
    configure_logging()
    init_db()
    log.info("app_started", app=settings.APP_NAME, env=settings.ENV)

if __name__ == "__main__":
    uvicorn.run("userfields.main:app", host="127.0.0.1", port=8080, reload=(settings.ENV == "dev")) # http://localhost:8080
