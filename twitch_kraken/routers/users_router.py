"""User, follow, subscription and block routes"""

from fastapi import APIRouter, Depends, Query, Response

from twitch_kraken.core.dependencies import get_access_client, get_client
from twitch_kraken.services import AccessClient, Client

router = APIRouter(tags=["users"])


# ============================================
# Unauthenticated
# ============================================


@router.get("/users")
async def get_users_by_name(
    login: list[str] = Query(...),
    client: Client = Depends(get_client),
) -> list[dict]:
    """Look up users by login name (repeat ``login`` for several)."""
    users = await client.get_users_by_name(*login)
    return [user.to_payload() for user in users]


@router.get("/users/{user_id}")
async def get_user_by_id(user_id: str, client: Client = Depends(get_client)) -> dict:
    user = await client.get_user_by_id(user_id)
    return user.to_payload()


@router.get("/users/{user_id}/follows")
async def get_user_follows(
    user_id: str,
    limit: int = Query(default=25, ge=1, le=100),
    offset: int = Query(default=0, ge=0),
    client: Client = Depends(get_client),
) -> dict:
    follows = await client.get_user_follows(user_id, limit=limit, offset=offset)
    return follows.to_payload()


@router.get("/users/{user_id}/follows/{channel_id}")
async def check_user_follows_channel(
    user_id: str, channel_id: str, client: Client = Depends(get_client)
) -> dict:
    follow = await client.check_user_follows_channel(user_id, channel_id)
    return follow.to_payload()


# ============================================
# Authenticated
# ============================================


@router.get("/user")
async def get_user(access_client: AccessClient = Depends(get_access_client)) -> dict:
    """User owning the stored access token"""
    user = await access_client.get_user()
    return user.to_payload()


@router.get("/users/{user_id}/subscriptions/{channel_id}")
async def get_user_subscription(
    user_id: str,
    channel_id: str,
    access_client: AccessClient = Depends(get_access_client),
) -> dict:
    subscription = await access_client.get_user_subscription(user_id, channel_id)
    return subscription.to_payload()


@router.put("/users/{user_id}/follows/{channel_id}")
async def follow_channel(
    user_id: str,
    channel_id: str,
    notify: bool = False,
    access_client: AccessClient = Depends(get_access_client),
) -> dict:
    follow = await access_client.follow_channel(user_id, channel_id, notify=notify)
    return follow.to_payload()


@router.delete("/users/{user_id}/follows/{channel_id}", status_code=204)
async def unfollow_channel(
    user_id: str,
    channel_id: str,
    access_client: AccessClient = Depends(get_access_client),
) -> Response:
    await access_client.unfollow_channel(user_id, channel_id)
    return Response(status_code=204)


@router.put("/users/{user_id}/blocks/{blocked_id}")
async def block_user(
    user_id: str,
    blocked_id: str,
    access_client: AccessClient = Depends(get_access_client),
) -> dict:
    block = await access_client.block_user(user_id, blocked_id)
    return block.to_payload()
