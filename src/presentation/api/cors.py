"""
CORS - En-tetes cross-origin explicites.

Responsabilite unique:
----------------------
Ajouter les en-tetes CORS a chaque reponse et repondre aux requetes
OPTIONS (pre-flight) par un 204 vide. Utilise avec
BaseHTTPMiddleware(dispatch=CorsHeaders(origin)).

Origine:
--------
"*" renvoie l'Origin de la requete (necessaire avec
Allow-Credentials), sinon la valeur configuree est envoyee telle quelle.
"""

from starlette.responses import Response

ALLOW_METHODS = "GET,POST,OPTIONS"
ALLOW_HEADERS = "authorization, content-type"


class CorsHeaders:
    """Middleware CORS permissif mais explicite."""

    def __init__(self, allowed_origin: str = "*"):
        """
        Initialise le middleware.

        Args:
            allowed_origin: Origine autorisee, ou "*".
        """
        self._allowed_origin = allowed_origin

    async def __call__(self, request, call_next):
        """Court-circuite les pre-flight et decore les reponses."""
        if request.method == "OPTIONS":
            response = Response(status_code=204)
        else:
            response = await call_next(request)

        for name, value in self.headers_for(request.headers.get("origin")).items():
            response.headers[name] = value
        return response

    def headers_for(self, request_origin: str | None) -> dict[str, str]:
        """En-tetes CORS pour une requete donnee."""
        origin = self._allowed_origin
        if origin == "*":
            origin = request_origin or "*"
        return {
            "Access-Control-Allow-Origin": origin,
            "Access-Control-Allow-Credentials": "true",
            "Access-Control-Allow-Methods": ALLOW_METHODS,
            "Access-Control-Allow-Headers": ALLOW_HEADERS,
        }
