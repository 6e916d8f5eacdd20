"""
Export of annotations as a browser download
Author: Cascade (AI assistant)

The payload is wrapped into an attachment response; the browser's native
save flow takes it from there.
"""

from urllib.parse import quote

from ..ports.messages import Download, ExportAnnotations

DEFAULT_FILENAME = "annotations.json"
DEFAULT_MEDIA_TYPE = "text/plain"


def download(data: str, name: str, media_type: str) -> Download:
    """Build a download of `data`, encoded as UTF-8, named `name`."""
    return Download(filename=name, media_type=media_type, content=data.encode("utf-8"))


def export_annotations(
    request: ExportAnnotations,
    filename: str = DEFAULT_FILENAME,
    media_type: str = DEFAULT_MEDIA_TYPE,
) -> Download:
    return download(request.content, filename, media_type)


def content_disposition(filename: str) -> str:
    """Attachment header value, with an RFC 5987 fallback for non-ASCII names."""
    ascii_name = filename.encode("ascii", "replace").decode("ascii").replace('"', "")
    if ascii_name == filename:
        return f'attachment; filename="{filename}"'
    return f"attachment; filename=\"{ascii_name}\"; filename*=UTF-8''{quote(filename)}"
