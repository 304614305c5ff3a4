"""
Publishing packed messages to the pre-created webhook messages.
"""
import logging
from itertools import chain, repeat
from typing import List, Sequence, Tuple

from ..api.client import RegistryAPI

logger = logging.getLogger(__name__)

# content for message slots left over once the report is exhausted
EMPTY_SLOT_CONTENT = "-"


async def publish_blocks(
    api: RegistryAPI,
    message_ids: Sequence[str],
    blocks: List[str]
) -> Tuple[Tuple[str, ...], str]:
    """
    Write blocks into the configured messages, one at a time and in order.

    Blocks beyond the number of message ids are dropped.

    Args:
        api: Open RegistryAPI bound to the webhook
        message_ids: Message ids in display order
        blocks: Packed report messages

    Returns:
        (ids that were updated, concatenated response bodies)
    """
    if len(blocks) > len(message_ids):
        logger.info(
            f"Report needs {len(blocks)} messages but only {len(message_ids)} are configured; "
            f"dropping {len(blocks) - len(message_ids)}"
        )

    contents = chain(blocks, repeat(EMPTY_SLOT_CONTENT))
    updated = []
    responses = ""

    for message_id, content in zip(message_ids, contents):
        responses += await api.edit_message(message_id, content)
        responses += "\n"
        updated.append(message_id)
        logger.info(f"📤 Updated message {message_id} ({len(content)} chars)")

    return tuple(updated), responses
