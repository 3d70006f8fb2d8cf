"""
Client WPGraphQL — POST {query, variables} sur <WORDPRESS_URL>/graphql.

Ne lève jamais : erreurs HTTP, réseau, JSON invalide et `errors` GraphQL
sont journalisées puis renvoyées dans QueryResult.error. Pour l'appelant,
une erreur = « pas de données ».
"""
import logging
from typing import Any, Dict, Optional

import requests
from pydantic import BaseModel

from .. import config

log = logging.getLogger(__name__)


class QueryResult(BaseModel):
    data: Optional[Dict[str, Any]] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None and self.data is not None


class WordPressClient:
    """
    Usage:
        >>> client = WordPressClient()
        >>> result = client.query(GET_POST_BY_SLUG, {"slug": "hello-world"})
        >>> result.data["post"] if result.ok else None
    """

    def __init__(
        self,
        endpoint: Optional[str] = None,
        timeout: Optional[float] = None,
        session: Optional[requests.Session] = None,
    ):
        self.endpoint = endpoint or config.graphql_endpoint()
        self.timeout = timeout if timeout is not None else config.wp_timeout()
        self.session = session or requests.Session()

    def query(self, document: str, variables: Optional[Dict[str, Any]] = None) -> QueryResult:
        payload = {"query": document, "variables": variables or {}}
        try:
            resp = self.session.post(
                self.endpoint,
                json=payload,
                headers={"Content-Type": "application/json"},
                timeout=self.timeout,
            )
            resp.raise_for_status()
            body = resp.json()
        except requests.RequestException as e:
            log.error("[GraphQL] requête échouée (%s) : %s", self.endpoint, e)
            return QueryResult(error=str(e))
        except ValueError as e:
            log.error("[GraphQL] réponse non JSON (%s) : %s", self.endpoint, e)
            return QueryResult(error=f"Invalid JSON response: {e}")

        if not isinstance(body, dict):
            log.error("[GraphQL] réponse inattendue : %r", body)
            return QueryResult(error="Unexpected GraphQL response")

        errors = body.get("errors")
        if errors:
            first = errors[0] if isinstance(errors, list) and errors else {}
            message = first.get("message", "GraphQL error") if isinstance(first, dict) else str(first)
            log.error("[GraphQL] erreurs : %s", errors)
            return QueryResult(data=body.get("data"), error=message)

        return QueryResult(data=body.get("data"))


_default_client: Optional[WordPressClient] = None


def get_client() -> WordPressClient:
    """Client partagé du process (session HTTP réutilisée)."""
    global _default_client
    if _default_client is None:
        _default_client = WordPressClient()
    return _default_client
