"""
Basic usage - Login and read the network counters
"""
import asyncio
import os

from fiosstats import GatewayClient


async def main():
    async with GatewayClient() as gateway:
        await gateway.login(os.environ["GATEWAY_PASSWORD"])

        sample = await gateway.get_network_sample()
        print(f"Data: {sample}")

        await gateway.logout()


if __name__ == "__main__":
    asyncio.run(main())
