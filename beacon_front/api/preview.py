"""
Session de prévisualisation (brouillons WordPress).

Trois cookies, durée de vie PREVIEW_MAX_AGE :
    wp_preview_post_id    identifiant numérique du contenu
    wp_preview_post_type  type WordPress (post, page, flms-courses…)
    wp_preview            drapeau signé (HMAC des deux précédents)

Un drapeau absent ou falsifié = pas de prévisualisation.
"""
import hashlib
import hmac
import logging
import secrets
from typing import Any, Dict, Optional

import requests
from fastapi import Request, Response
from pydantic import BaseModel, ValidationError, field_validator

from .. import config

log = logging.getLogger(__name__)

COOKIE_POST_ID = "wp_preview_post_id"
COOKIE_POST_TYPE = "wp_preview_post_type"
COOKIE_FLAG = "wp_preview"

# Sans FAUST_SECRET_KEY, les drapeaux ne valent que pour ce process
_PROCESS_KEY = secrets.token_bytes(32)

# post_type WordPress → segment d'URL de prévisualisation
PREVIEW_PATHS = {
    "post":         "post",
    "page":         "page",
    "flms-courses": "course",
}


class PreviewSession(BaseModel):
    enabled: bool = False
    post_id: Optional[str] = None
    post_type: Optional[str] = None


class TokenVerification(BaseModel):
    valid: bool = False
    post_id: Optional[str] = None
    post_type: Optional[str] = None
    uri: Optional[str] = None

    @field_validator("post_id", mode="before")
    @classmethod
    def _id_str(cls, v):
        # Faust renvoie un entier, parfois une chaîne
        return None if v is None else str(v)


def _signing_key() -> bytes:
    secret = config.faust_secret()
    return secret.encode() if secret else _PROCESS_KEY


def sign_session(post_id: str, post_type: str) -> str:
    message = f"{post_id}:{post_type}".encode()
    return hmac.new(_signing_key(), message, hashlib.sha256).hexdigest()


def read_session(request: Request) -> PreviewSession:
    post_id = request.cookies.get(COOKIE_POST_ID)
    post_type = request.cookies.get(COOKIE_POST_TYPE)
    flag = request.cookies.get(COOKIE_FLAG)
    if not flag:
        return PreviewSession(post_id=post_id, post_type=post_type)
    enabled = hmac.compare_digest(flag, sign_session(post_id or "", post_type or ""))
    if not enabled:
        log.warning("Drapeau de prévisualisation invalide ignoré")
    return PreviewSession(enabled=enabled, post_id=post_id, post_type=post_type)


def _cookie_options() -> Dict[str, Any]:
    return {
        "max_age": config.PREVIEW_MAX_AGE,
        "httponly": True,
        "secure": config.is_production(),
        "samesite": "lax",
        "path": "/",
    }


def start_session(response: Response, post_id: str, post_type: str) -> None:
    options = _cookie_options()
    response.set_cookie(COOKIE_POST_ID, post_id, **options)
    response.set_cookie(COOKIE_POST_TYPE, post_type, **options)
    response.set_cookie(COOKIE_FLAG, sign_session(post_id, post_type), **options)


def clear_session(response: Response) -> None:
    for name in (COOKIE_POST_ID, COOKIE_POST_TYPE, COOKIE_FLAG):
        response.delete_cookie(name, path="/")


# ── Vérification du jeton (plugin Faust) ────────────────────────────────────

def verify_preview_token(token: str, session: Optional[requests.Session] = None) -> TokenVerification:
    """POST {code, secret} sur /wp-json/faustwp/v1/authorize. Toute erreur → invalide."""
    secret = config.faust_secret()
    if not secret:
        log.error("FAUST_SECRET_KEY non configurée : jeton de prévisualisation refusé")
        return TokenVerification()

    url = f"{config.wordpress_url()}/wp-json/faustwp/v1/authorize"
    http = session or requests
    try:
        resp = http.post(url, json={"code": token, "secret": secret}, timeout=config.wp_timeout())
    except requests.RequestException as e:
        log.error("Vérification du jeton impossible : %s", e)
        return TokenVerification()

    if not resp.ok:
        log.error("Jeton de prévisualisation refusé : HTTP %s", resp.status_code)
        return TokenVerification()

    try:
        data = resp.json()
    except ValueError:
        log.error("Réponse d'autorisation non JSON")
        return TokenVerification()
    if not isinstance(data, dict):
        data = {}

    try:
        return TokenVerification(
            valid=True,
            post_id=data.get("post_id"),
            post_type=data.get("post_type"),
            uri=data.get("uri"),
        )
    except ValidationError as e:
        log.error("Réponse d'autorisation inattendue : %s", e.errors()[:3])
        return TokenVerification()


def build_preview_url(post_id: Any, post_type: str, uri: Optional[str] = None) -> str:
    if uri:
        return f"/preview{uri if uri.startswith('/') else '/' + uri}"
    segment = PREVIEW_PATHS.get(post_type, post_type)
    return f"/preview/{segment}/{post_id}"


def preview_target_from_path(path: str) -> Dict[str, Optional[str]]:
    """
    "/post/123" → {"post_id": "123", "post_type": "post"}.

    Le dernier segment doit être numérique ; le type est déduit des segments.
    """
    segments = [s for s in path.split("/") if s]
    if not segments or not segments[-1].isdigit():
        return {"post_id": None, "post_type": None}
    post_type = None
    if "post" in segments:
        post_type = "post"
    elif "page" in segments:
        post_type = "page"
    elif "course" in segments:
        post_type = "flms-courses"
    return {"post_id": segments[-1], "post_type": post_type}


def safe_redirect(target: Optional[str]) -> str:
    """Redirection locale uniquement (pas d'URL absolue ni « //hôte »)."""
    if not target or not target.startswith("/") or target.startswith("//"):
        return "/"
    return target
