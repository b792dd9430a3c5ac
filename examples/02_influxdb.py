"""
Push counters to InfluxDB - custom host and a verifying CA bundle
"""
import asyncio
import os

from fiosstats import GatewayClient, APIConfig, SSLConfig, setup_logging


async def main():
    setup_logging()

    config = APIConfig.for_host(
        "192.168.1.1",
        ssl=SSLConfig(verify=True, ca_file="gateway-ca.pem"),
    )

    async with GatewayClient(config=config) as gateway:
        await gateway.login(os.environ["GATEWAY_PASSWORD"])
        try:
            sample = await gateway.get_network_sample()
            body = await gateway.push_metrics("http://localhost:8086/write?db=network", sample)
            print(body, end="")
        finally:
            await gateway.logout()


if __name__ == "__main__":
    asyncio.run(main())
