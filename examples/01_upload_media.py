"""
Upload media and resolve its download URL
"""
import asyncio
from wapipy import WapiClient, APIConfig, MediaNotFound

PHONE_NUMBER_ID = "1234567890"


async def main():
    async with WapiClient(config=APIConfig.from_env()) as wapi:

        # Upload a local file (MIME type guessed from the extension)
        media_id = await wapi.upload_media_file(PHONE_NUMBER_ID, "photo.jpg")
        print(f"Uploaded: {media_id}")

        # Upload bytes you already have
        media_id = await wapi.upload_media(
            PHONE_NUMBER_ID, b"hello", "hello.txt", "text/plain"
        )

        # URLs expire: resolve right before downloading
        try:
            url = await wapi.get_media_url(media_id)
            print(f"Download from: {url}")
        except MediaNotFound as e:
            print(f"No URL available: {e}")

        await wapi.delete_media(media_id)


if __name__ == "__main__":
    asyncio.run(main())
