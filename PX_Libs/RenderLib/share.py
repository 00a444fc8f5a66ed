"""
Email-relay boundary for PicX.

The relay is any callable that accepts a ShareRequest and delivers it. PicX
never talks to a mail service directly; the UI injects whatever relay is
configured. Failures are reported as False, never retried.
"""

from dataclasses import asdict, dataclass
from typing import Any, Callable, Dict
import logging
import re

from PX_Libs.constants import DEFAULT_SHARE_MESSAGE
from PX_Libs.RenderLib.compositor import to_data_uri

logger = logging.getLogger(__name__)

_EMAIL_PATTERN = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")


@dataclass(frozen=True)
class ShareRequest:
    """Payload handed to the email relay."""
    recipient: str
    message: str
    image_data_uri: str

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


Relay = Callable[[ShareRequest], Any]


def is_valid_recipient(recipient: Any) -> bool:
    """Return True if recipient looks like a single email address."""
    if not isinstance(recipient, str):
        return False
    return bool(_EMAIL_PATTERN.match(recipient.strip()))


def share_image(relay: Relay, recipient: str, image: Any,
                message: str = DEFAULT_SHARE_MESSAGE) -> bool:
    """
    Send an exported image to a recipient through the relay.

    Args:
        relay: Callable that delivers a ShareRequest
        recipient: Destination email address
        image: PIL Image to share
        message: Message body

    Returns:
        True if the relay accepted the request, False otherwise
    """
    if not is_valid_recipient(recipient):
        logger.warning(f"Refusing to share: invalid recipient {recipient!r}")
        return False

    request = ShareRequest(
        recipient=recipient.strip(),
        message=message,
        image_data_uri=to_data_uri(image),
    )

    try:
        relay(request)
    except Exception as e:
        logger.warning(f"Email relay failed for {request.recipient}: {e}")
        return False

    logger.info(f"Shared image with {request.recipient}")
    return True
