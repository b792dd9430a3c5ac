"""InfluxDB line protocol rendering."""
from typing import Mapping


def _escape_measurement(name: str) -> str:
    return name.replace(',', r'\,').replace(' ', r'\ ')


def _escape_tag(value: str) -> str:
    return value.replace(',', r'\,').replace('=', r'\=').replace(' ', r'\ ')


def format_line(name: str, host: str, value: int) -> str:
    """
    Render one integer point.

    Example:
        >>> format_line('net_tx', 'myfiosgateway.com', 160)
        'net_tx,host=myfiosgateway.com value=160i'
    """
    return f"{_escape_measurement(name)},host={_escape_tag(host)} value={int(value)}i"


def build_body(metrics: Mapping[str, int], host: str) -> str:
    """Render one newline-terminated line per metric, in mapping order."""
    return ''.join(
        format_line(name, host, value) + '\n'
        for name, value in metrics.items()
    )
