from dataclasses import dataclass

PDF_MIME_TYPE = "application/pdf"


@dataclass(frozen=True)
class TextSegment:
    """Inline prompt text."""

    text: str


@dataclass(frozen=True)
class InlineDataSegment:
    """Inline attachment. Data is base64 without any data-URL prefix."""

    mime_type: str
    data: str
    name: str = ""

    @property
    def is_image(self) -> bool:
        return self.mime_type.startswith("image/")


ContentSegment = TextSegment | InlineDataSegment


def strip_data_url_prefix(data: str) -> str:
    """Drop a 'data:<mime>;base64,' prefix if present."""
    if data.startswith("data:") and "," in data:
        return data.split(",", 1)[1]
    return data


def is_attachment_mime(mime_type: str) -> bool:
    return mime_type.startswith("image/") or mime_type == PDF_MIME_TYPE
