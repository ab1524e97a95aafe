"""
Upload a flow definition and inspect validation errors
"""
import asyncio
from wapipy import WapiClient, APIConfig, AssetRejected

FLOW_ID = "FLOW_ID"

FLOW = {
    "version": "3.1",
    "screens": [
        {
            "id": "WELCOME",
            "title": "Welcome",
            "terminal": True,
            "layout": {"type": "SingleColumnLayout", "children": []},
        }
    ],
}


async def main():
    async with WapiClient(config=APIConfig.from_env()) as wapi:

        # A 2xx does not mean the flow was accepted
        result = await wapi.upload_flow_json(FLOW_ID, FLOW)
        for error in result.validation_errors:
            print(f"  {error}")

        try:
            result.raise_for_errors()
        except AssetRejected:
            return

        print(await wapi.get_flow_json(FLOW_ID))


if __name__ == "__main__":
    asyncio.run(main())
