#!/usr/bin/env python3
"""
Post sample supplier WhatsApp messages to a running API through the mock
webhook, then print what the parser extracted.

Usage:
    python scripts/send_sample_messages.py [http://localhost:8000]
"""
import asyncio
import sys

import httpx

SAMPLE_MESSAGES = [
    ("919876543210", "ABC Trading Co.", "Delivered 500 tons of raw steel to Mumbai factory today at 3pm"),
    ("919876543211", "XYZ Suppliers", "Shipment delayed due to traffic. Will reach Delhi by 5pm"),
    ("919876543212", "PQR Industries", "Order confirmed, 1000 yards of textile dispatched to Chennai"),
    ("919876543213", "Sharma Foods", "delivered 200 bags of rice at Pune warehouse"),
]


async def send_messages(base_url: str) -> bool:
    async with httpx.AsyncClient(base_url=base_url, timeout=30) as client:
        message_ids = []
        for sender_id, sender_name, text in SAMPLE_MESSAGES:
            response = await client.post("/api/webhook/whatsapp", json={
                "sender": {"id": sender_id, "name": sender_name},
                "message": {"text": text},
            })
            if response.status_code != 200:
                print(f"Error: {response.status_code} {response.text}")
                return False
            message_ids.append(response.json()["message_id"])
            print(f"Sent message {message_ids[-1]} from {sender_name}")

        # Parsing completes after the configured delay
        print("Waiting for processing...")
        await asyncio.sleep(2)

        for message_id in message_ids:
            record = (await client.get(f"/api/whatsapp-messages/{message_id}")).json()
            print(f"\nMessage {message_id}: {record['processing_status']}")
            for key, value in (record.get("extracted_data") or {}).items():
                print(f"  {key}: {value}")
    return True


if __name__ == "__main__":
    url = sys.argv[1] if len(sys.argv) > 1 else "http://localhost:8000"
    try:
        ok = asyncio.run(send_messages(url))
    except httpx.ConnectError:
        print(f"ERROR: could not connect to {url}. Is the API running?")
        ok = False
    sys.exit(0 if ok else 1)
