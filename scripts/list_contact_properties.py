import asyncio, sys, json
import httpx

async def main():
    base_url = sys.argv[1] if len(sys.argv) > 1 else "http://localhost:8099"
    if base_url in ("-h", "--help"):
        print("Usage: python scripts/list_contact_properties.py [base_url]")
        raise SystemExit(1)
    async with httpx.AsyncClient(timeout=60) as client:
        r = await client.get(f"{base_url}/hubspot/contact-properties")
        r.raise_for_status()
        for prop in r.json():
            print(json.dumps({"name": prop["name"], "label": prop["label"]}))

if __name__ == "__main__":
    asyncio.run(main())
