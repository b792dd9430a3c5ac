"""
Time-series sink.

Pushes line protocol points to an InfluxDB write URI such as
``http://influx:8086/write?db=network``.
"""
from typing import Mapping

from .line_protocol import build_body
from ..api.async_client import AsyncAPIClient, is_absolute_url
from ..exceptions import GatewayError, ProtocolError

# The existing sink deployment expects this header even though the body is
# line protocol, not JSON.
DEFAULT_CONTENT_TYPE = 'application/json;charset=UTF-8'
SUCCESS_STATUS = 204


class InfluxSink:
    """Writes metric points to one InfluxDB write endpoint."""

    def __init__(
        self,
        uri: str,
        host: str,
        client: AsyncAPIClient,
        content_type: str = DEFAULT_CONTENT_TYPE
    ):
        """
        Initialize the sink.

        Args:
            uri: Absolute write URI including the database
            host: Value of the ``host`` tag on every point
            client: Client used for the POST
            content_type: Content-Type header of the push

        Raises:
            GatewayError: If the URI is not an absolute http(s) URL
        """
        if not is_absolute_url(uri):
            raise GatewayError(
                f"InfluxDB URI must be an absolute http(s) URL: {uri!r}",
                operation='metric push'
            )
        self.uri = uri
        self.host = host
        self.content_type = content_type
        self._client = client

        from ..logging import get_logger
        self._logger = get_logger('fiosstats.sink')

    async def push(self, metrics: Mapping[str, int]) -> str:
        """
        POST the metrics in line protocol.

        Returns:
            The body that was sent

        Raises:
            TransportError: If the sink cannot be reached
            ProtocolError: If the sink answers anything but 204
        """
        body = build_body(metrics, self.host)
        self._logger.debug(f"Influx data:\n{body}")
        self._logger.debug(f"Saving data to InfluxDB: {self.uri}")

        response = await self._client.post(
            self.uri,
            body,
            self.content_type,
            operation='metric push'
        )

        if response.status != SUCCESS_STATUS:
            raise ProtocolError(
                f"Unexpected status from InfluxDB: {response.status}",
                status_code=response.status,
                operation='metric push'
            )

        return body
