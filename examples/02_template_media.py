"""
Upload a template header image through a resumable session
"""
import asyncio
from pathlib import Path
from wapipy import WapiClient, APIConfig

APP_ID = "APP_ID"


async def main():
    async with WapiClient(config=APIConfig.from_env()) as wapi:
        data = Path("header.png").read_bytes()

        # One call: create session + push at offset 0
        handle = await wapi.upload_media_for_template(APP_ID, data, "image/png")
        print(f"header_handle: {handle}")

        # Or drive the two steps yourself
        session = await wapi.media.create_upload_session(APP_ID, len(data), "image/png")
        handle = await wapi.media.upload_session_data(session, data)
        print(f"Session {session.state.value}: {handle}")


if __name__ == "__main__":
    asyncio.run(main())
