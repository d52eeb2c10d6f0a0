"""Pydantic schemas for Twist API resources."""

from twist_cli.schemas.attachments import Attachment, AttachmentTarget
from twist_cli.schemas.channels import Channel, ChannelOptions, ChannelUpdate
from twist_cli.schemas.conversations import Conversation, ConversationMessage
from twist_cli.schemas.groups import Group, GroupOptions, GroupUpdate
from twist_cli.schemas.reactions import Reaction, ReactionTarget
from twist_cli.schemas.threads import Comment, Thread, ThreadUpdate
from twist_cli.schemas.workspaces import User, Workspace

__all__ = [
    # Workspaces
    "User",
    "Workspace",
    # Channels
    "Channel",
    "ChannelOptions",
    "ChannelUpdate",
    # Threads
    "Comment",
    "Thread",
    "ThreadUpdate",
    # Conversations
    "Conversation",
    "ConversationMessage",
    # Groups
    "Group",
    "GroupOptions",
    "GroupUpdate",
    # Reactions
    "Reaction",
    "ReactionTarget",
    # Attachments
    "Attachment",
    "AttachmentTarget",
]
