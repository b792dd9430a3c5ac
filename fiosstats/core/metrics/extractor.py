"""Network counter extraction from ``network/<n>`` documents."""
import json
from typing import Any, Dict, Union

from ..exceptions import ParseError
from ..models import BITS_PER_BYTE, NetworkSample, NetworkStatus


def extract_network_sample(document: Union[str, Dict[str, Any]]) -> NetworkSample:
    """
    Extract the current interface counters, scaled from bytes to bits.

    Reads ``bandwidth.minutesRx[0]``, ``bandwidth.minutesTx[0]``,
    ``rxErrors`` and ``rxDropped``. There is no zero-fill: a missing or
    non-numeric counter is an error.

    Args:
        document: Raw response body or an already decoded document

    Returns:
        NetworkSample with every counter multiplied by 8

    Raises:
        ParseError: If the body is not JSON or a counter is missing/invalid
    """
    if isinstance(document, (str, bytes)):
        try:
            document = json.loads(document)
        except ValueError as e:
            raise ParseError(
                f"Invalid JSON in network status: {e}",
                operation='network status',
                cause=e
            ) from e

    status = NetworkStatus.from_dict(document)

    return NetworkSample(
        rx=status.bandwidth.minutes_rx[0] * BITS_PER_BYTE,
        tx=status.bandwidth.minutes_tx[0] * BITS_PER_BYTE,
        rx_errors=status.rx_errors * BITS_PER_BYTE,
        rx_dropped=status.rx_dropped * BITS_PER_BYTE,
    )
