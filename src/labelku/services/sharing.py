"""
Handing receipts to the outside world: files, clipboard, share links.

Every function here reports failure through its return value (None or
False) and logs the cause instead of raising.
"""

import os
import shutil
import subprocess
from urllib.parse import quote

from labelku.config import EMAIL_SUBJECT
from labelku.constants import CLIPBOARD_TIMEOUT_SECS, OPEN_URL_TIMEOUT_SECS
from labelku.services.receipt_pdf import RenderedReceipt
from labelku.utils.logger import logger

# Characters JavaScript's encodeURIComponent leaves unescaped
_URI_COMPONENT_SAFE = "-_.!~*'()"

# Clipboard helpers tried in order: Wayland, then X11
_CLIPBOARD_COMMANDS: tuple[tuple[str, ...], ...] = (
    ("wl-copy",),
    ("xclip", "-selection", "clipboard"),
    ("xsel", "--clipboard", "--input"),
)


def encode_uri_component(text: str) -> str:
    """Percent-encode text the way encodeURIComponent does."""
    return quote(text, safe=_URI_COMPONENT_SAFE)


def whatsapp_url(text: str) -> str:
    return f"https://wa.me/?text={encode_uri_component(text)}"


def telegram_url(text: str) -> str:
    return f"https://t.me/share/url?text={encode_uri_component(text)}"


def email_url(text: str, subject: str = EMAIL_SUBJECT) -> str:
    return f"mailto:?subject={encode_uri_component(subject)}&body={encode_uri_component(text)}"


SHARE_TARGETS = {
    "whatsapp": whatsapp_url,
    "telegram": telegram_url,
    "email": email_url,
}


def open_url(url: str) -> bool:
    """Open a URL with the desktop's default handler.

    Returns:
        True if xdg-open accepted the URL, False otherwise
    """
    opener = shutil.which("xdg-open")
    if not opener:
        logger.warning("xdg-open not found, cannot open share link")
        return False

    try:
        result = subprocess.run(
            [opener, url],
            capture_output=True,
            check=False,
            timeout=OPEN_URL_TIMEOUT_SECS,
        )
    except (OSError, subprocess.TimeoutExpired) as e:
        logger.error(f"Failed to open share link: {e}")
        return False

    return result.returncode == 0


def copy_to_clipboard(text: str) -> bool:
    """Copy text to the system clipboard.

    Tries wl-copy, xclip and xsel in that order.

    Returns:
        True if one of the helpers succeeded, False otherwise
    """
    for command in _CLIPBOARD_COMMANDS:
        if not shutil.which(command[0]):
            continue
        try:
            result = subprocess.run(
                list(command),
                input=text,
                text=True,
                capture_output=True,
                check=False,
                timeout=CLIPBOARD_TIMEOUT_SECS,
            )
        except (OSError, subprocess.TimeoutExpired) as e:
            logger.warning(f"{command[0]} failed: {e}")
            continue
        if result.returncode == 0:
            logger.debug(f"Copied {len(text)} characters with {command[0]}")
            return True
        logger.warning(f"{command[0]} exited with code {result.returncode}")

    logger.error("No working clipboard helper found (wl-copy, xclip, xsel)")
    return False


def save_receipt_pdf(receipt: RenderedReceipt, directory: str) -> str | None:
    """Write a rendered receipt as resi-<tracking>.pdf inside ``directory``.

    Args:
        receipt: Rendered receipt
        directory: Destination folder, created if missing

    Returns:
        Path to the saved file, or None on failure
    """
    try:
        os.makedirs(directory, exist_ok=True)
        pdf_path = os.path.join(directory, receipt.filename)
        with open(pdf_path, "wb") as f:
            f.write(receipt.pdf)
    except OSError as e:
        logger.error(f"Failed to save receipt PDF: {e}")
        return None

    logger.info(f"Saved receipt to: {pdf_path}")
    return pdf_path
