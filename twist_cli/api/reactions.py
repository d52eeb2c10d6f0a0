"""Reaction endpoints."""

from typing import TYPE_CHECKING

from twist_cli.api.payloads import coerce_target
from twist_cli.schemas import Reaction, ReactionTarget

if TYPE_CHECKING:
    from twist_cli.api.client import TwistClient


class ReactionsAPI:
    """Emoji reactions on threads and comments."""

    def __init__(self, client: "TwistClient"):
        self._client = client

    def add_reaction(
        self,
        target_type: ReactionTarget | str,
        target_id: int,
        emoji: str,
    ) -> Reaction:
        target = coerce_target(target_type, ReactionTarget)
        payload = {"object_type": target.value, "object_id": target_id, "emoji": emoji}
        return self._client.post("/reactions/add", payload, Reaction)

    def remove_reaction(
        self,
        target_type: ReactionTarget | str,
        target_id: int,
        emoji: str,
    ) -> None:
        target = coerce_target(target_type, ReactionTarget)
        payload = {"object_type": target.value, "object_id": target_id, "emoji": emoji}
        self._client.post("/reactions/remove", payload)

    def list_reactions(
        self,
        target_type: ReactionTarget | str,
        target_id: int,
    ) -> list[Reaction]:
        target = coerce_target(target_type, ReactionTarget)
        return self._client.get("/reactions/get", list[Reaction], **{target.value: target_id})
