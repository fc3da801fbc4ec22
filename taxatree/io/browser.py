"""Opening reference links in a web browser."""

import logging
import webbrowser
from typing import Optional

from taxatree.models.errors import TaxaTreeError

logger = logging.getLogger(__name__)

class BrowserError(TaxaTreeError):
    """Raised when a reference link cannot be handed to a browser."""
    pass

def open_reference_link(url: str, browser: Optional[str] = None) -> bool:
    """
    Open url in the named browser, or the system default.

    Args:
        url: Link to open
        browser: Name accepted by webbrowser.get(), None for the default

    Returns:
        False when there is no link to open, True once it has been handed off

    Raises:
        BrowserError: If the browser cannot be found or refuses the link
    """
    if not url:
        logger.info("No reference link available for this node")
        return False
    logger.info(f"Attempting to open reference link: {url}")
    try:
        controller = webbrowser.get(browser) if browser else webbrowser.get()
    except webbrowser.Error as e:
        raise BrowserError(f"No usable browser found: {str(e)}")
    if not controller.open(url):
        raise BrowserError(f"Browser refused to open {url}")
    return True
