"""OAuth routes: redirect to Twitch and receive the authorization code"""

from fastapi import APIRouter

from twitch_kraken.core.dependencies import AccessStore
from twitch_kraken.services import Client


def build_router(client: Client, store: AccessStore, scopes: list[str]) -> APIRouter:
    """Mount the Client's OAuth handlers.

    The handlers are plain endpoints built by the Client, so they are bound
    here rather than resolved per request.
    """
    router = APIRouter(tags=["authentication"])

    router.add_api_route("/", client.authorize(*scopes), methods=["GET"])
    router.add_api_route(
        "/authorized", client.handle_authorization(store.handle_access), methods=["GET"]
    )

    return router
