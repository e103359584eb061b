"""
Resume text extraction from uploaded files, using pypdf for PDFs.
"""

from io import BytesIO

from pypdf import PdfReader
from pypdf.errors import PyPdfError

from jobmatch.errors import ValidationError

TEXT_TYPES = ("text/plain", "text/markdown")


def parse_pdf(pdf_content: bytes) -> str:
    """
    Extract text from a PDF file.

    Args:
        pdf_content: Raw bytes of the PDF file

    Returns:
        Extracted text content from all pages
    """
    try:
        reader = PdfReader(BytesIO(pdf_content))
        text_parts = []
        for page in reader.pages:
            page_text = page.extract_text()
            if page_text:
                text_parts.append(page_text)
    except PyPdfError as e:
        raise ValidationError(f"Failed to parse PDF: {e}") from e

    return "\n\n".join(text_parts)


def extract_resume_text(content: bytes, filename: str, content_type: str | None = None) -> str:
    """Extract text from a PDF or plain text upload."""
    name = (filename or "").lower()
    if name.endswith(".pdf") or content_type == "application/pdf":
        text = parse_pdf(content)
    elif name.endswith((".txt", ".md")) or content_type in TEXT_TYPES:
        text = content.decode("utf-8", errors="replace")
    else:
        raise ValidationError("Only PDF and plain text files are supported")

    if not text.strip():
        raise ValidationError("File appears to be empty or unreadable")
    return text.strip()
