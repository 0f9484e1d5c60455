"""
➡️ But : Personnaliser la documentation Swagger/OpenAPI.

custom_openapi(app) complète le schéma généré par FastAPI avec les conventions de l'API.
"""

from fastapi.openapi.utils import get_openapi

def custom_openapi(app):
    if app.openapi_schema:
        return app.openapi_schema
    openapi_schema = get_openapi(
        title=app.title,
        version=app.version,
        description=(
            "Groupes de champs de profil, types de champs et avatars.\n\n"
            "### Conventions\n"
            "- Pagination: query params `page` & `size`.\n"
            "- Les groupes sont triés par `group_order` croissant.\n"
            "- Les valeurs invalides d'une colonne retombent sur sa valeur par défaut.\n"
        ),
        routes=app.routes,
        tags=app.openapi_tags,
    )
    app.openapi_schema = openapi_schema
    return app.openapi_schema
