import io
import logging

from PyPDF2 import PdfReader
from docx import Document

logger = logging.getLogger(__name__)


def extract_from_pdf(data: bytes) -> str:
    try:
        reader = PdfReader(io.BytesIO(data))
        return "\n".join((page.extract_text() or "") for page in reader.pages)
    except Exception as e:
        raise ValueError(f"Error extracting text from PDF: {e}") from e


def extract_from_docx(data: bytes) -> str:
    try:
        document = Document(io.BytesIO(data))
        return "\n".join(paragraph.text for paragraph in document.paragraphs)
    except Exception as e:
        raise ValueError(f"Error extracting text from DOCX: {e}") from e


def extract_from_txt(data: bytes) -> str:
    return data.decode("utf-8", errors="replace")


def extract_text_from_file(data: bytes, file_type: str) -> str:
    """
    Extracts plain text from an uploaded document.

    Args:
        data (bytes): Raw file contents.
        file_type (str): One of "pdf", "docx", "txt".

    Returns:
        str: The extracted text.

    Raises:
        ValueError: For unsupported types or unreadable files.
    """
    kind = file_type.lower()
    if kind == "pdf":
        return extract_from_pdf(data)
    if kind == "docx":
        return extract_from_docx(data)
    if kind == "txt":
        return extract_from_txt(data)
    raise ValueError(f"Unsupported file type: {file_type}")
