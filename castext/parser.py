import io
import re

from pymupdf import TEXTFLAGS_TEXT, Document, Rect

from castext import patterns
from castext.enums import CASType
from castext.exceptions import CASParseError, IncorrectPasswordError
from castext.types import InvestorInfo

WordData = tuple[Rect, str]


def detect_cas_type(text: str) -> CASType:
    """Detect the type of CAS statement (detailed or summary). Undetected text is treated as detailed."""
    if "Consolidated Account Summary" in text:
        return CASType.SUMMARY
    if "Consolidated Account Statement" in text:
        return CASType.DETAILED
    return CASType.DETAILED


def parse_investor_info(text: str) -> InvestorInfo:
    """
    Parse investor info from the statement header.

    Each field is extracted independently and left as None when absent. The
    name and address are the lines between the email line and the mobile number.

    Supported text formats
    ----------------------
    - "Email Id: joe@example.com
       Joe Doe
       12 Main Street
       Mumbai 400001
       Mobile: +919876543210"
    """
    investor_info = InvestorInfo()
    if email_match := re.search(patterns.INVESTOR_MAIL, text):
        investor_info.email = email_match.group(1).strip()

    if mobile_match := re.search(patterns.INVESTOR_MOBILE, text):
        investor_info.mobile = mobile_match.group(1)

    if block_match := re.search(patterns.INVESTOR_BLOCK, text):
        lines = [line.strip() for line in block_match.group(1).split("\n") if line.strip()]
        investor_info.name = lines[0] if lines else ""
        investor_info.address = ", ".join(lines[1:])

    return investor_info


def recover_lines(words: list[WordData], tolerance: float = 3, vertical_factor: int = 4) -> list[str]:
    """
    Reconstitute text lines on the page by using the coordinates of the single words.

    Parameters
    ----------
    words : list[WordData]
        Word rectangles and texts in reading order.
    tolerance : float
        Words whose top or bottom edge is within this distance of the line join it.
    vertical_factor : int
        Factor for detecting words aligned vertically, which are dropped. Single
        characters such as "-" or ":" are never treated as vertical.

    Returns
    -------
    list[str]
        Text lines ordered top to bottom, words ordered left to right.
    """
    lines: list[tuple[Rect, list[WordData]]] = []
    for rect, text in words:
        if len(text) > 1 and abs(rect.x1 - rect.x0) * vertical_factor < abs(rect.y1 - rect.y0):
            continue
        if lines:
            line_rect, line_words = lines[-1]
            if abs(line_rect.y0 - rect.y0) <= tolerance or abs(line_rect.y1 - rect.y1) <= tolerance:
                line_words.append((rect, text))
                lines[-1] = (line_rect | rect, line_words)
                continue
        lines.append((Rect(rect), [(rect, text)]))

    return [
        " ".join(text for _, text in sorted(line_words, key=lambda w: w[0].x0))
        for _, line_words in sorted(lines, key=lambda line: line[0].y1)
    ]


def cas_pdf_to_text(filename: str | io.IOBase, password: str | None = None, tolerance: float = 3) -> str:
    """
    Read a CAS pdf and return its page-oriented text.

    Parameters
    ----------
    filename : str | io.IOBase
        The path to the PDF file or a file-like object.
    password : str | None
        The password to unlock the PDF file.
    tolerance : float
        Vertical tolerance used to join words into a line.

    Returns
    -------
    str
        Newline separated lines, each page introduced by a ``=== Page N ===`` marker.
    """
    if isinstance(filename, str):
        fp = open(filename, "rb")  # NOQA
    elif hasattr(filename, "read") and hasattr(filename, "close"):  # file-like object
        fp = filename
    else:
        raise CASParseError("Invalid input. filename should be a string or a file like object")

    with fp:
        try:
            doc = Document(stream=fp.read(), filetype="pdf")
        except Exception as e:
            raise CASParseError(f"Unhandled error while opening file :: {e!s}") from e

        if doc.needs_pass and not doc.authenticate(password or ""):
            raise IncorrectPasswordError("Incorrect PDF password!")

        output: list[str] = []
        for page_num, page in enumerate(doc, start=1):
            words = [(Rect(w[:4]), w[4]) for w in page.get_text("words", sort=True, flags=TEXTFLAGS_TEXT)]
            output.append(f"=== Page {page_num} ===")
            output.extend(recover_lines(words, tolerance=tolerance))

        return "\n".join(output)
