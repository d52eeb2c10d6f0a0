"""Attachment endpoints: listing, upload and download."""

from pathlib import Path
from typing import TYPE_CHECKING, BinaryIO

import structlog

from twist_cli.api.errors import DecodeError
from twist_cli.api.payloads import coerce_target
from twist_cli.schemas import Attachment, AttachmentTarget

if TYPE_CHECKING:
    from twist_cli.api.client import TwistClient

logger = structlog.get_logger()


class AttachmentsAPI:
    """Files attached to threads, comments and conversations."""

    def __init__(self, client: "TwistClient"):
        self._client = client

    def list_attachments(
        self,
        target_type: AttachmentTarget | str,
        target_id: int,
    ) -> list[Attachment]:
        target = coerce_target(target_type, AttachmentTarget)
        return self._client.get(
            "/attachments/get",
            list[Attachment],
            **{target.field_name: target_id},
        )

    def get_attachment(self, attachment_id: int) -> Attachment:
        return self._client.get("/attachments/getone", Attachment, id=attachment_id)

    def upload_fileobj(
        self,
        target_type: AttachmentTarget | str,
        target_id: int,
        fileobj: BinaryIO,
        filename: str,
    ) -> Attachment:
        """Upload an open binary stream as a multipart ``file`` part."""
        target = coerce_target(target_type, AttachmentTarget)
        return self._client.request(
            "POST",
            "/attachments/upload",
            data={target.field_name: str(target_id)},
            files={"file": (filename, fileobj)},
            response_type=Attachment,
        )

    def upload(
        self,
        target_type: AttachmentTarget | str,
        target_id: int,
        path: str | Path,
    ) -> Attachment:
        """Upload a local file."""
        target = coerce_target(target_type, AttachmentTarget)
        path = Path(path)
        with path.open("rb") as fileobj:
            attachment = self.upload_fileobj(target, target_id, fileobj, path.name)
        logger.debug("Attachment uploaded", attachment_id=attachment.id, size=attachment.size)
        return attachment

    def download(self, attachment_id: int, output_path: str | Path) -> Path:
        """Download an attachment's bytes to ``output_path``.

        The attachment metadata is fetched first to resolve its signed URL;
        the file itself is then fetched without credentials. The output file
        is only created once the download has answered 200.
        """
        attachment = self.get_attachment(attachment_id)
        if not attachment.url:
            raise DecodeError(f"attachment {attachment_id} has no download URL")
        output_path = Path(output_path)
        with self._client.stream_unauthenticated(attachment.url) as response:
            with output_path.open("wb") as out:
                for chunk in response.iter_bytes():
                    out.write(chunk)
        logger.debug("Attachment downloaded", attachment_id=attachment_id, path=str(output_path))
        return output_path
