#!/usr/bin/env python3
"""
Send an encrypted request to a running server and decrypt the reply.
Start the server first with `aes-demo`.
"""

import json

import requests

from aes_demo.core.aes import aes_decrypt, aes_encrypt, key_bytes
from aes_demo.shared import load_config

# Configuration
config = load_config()
BASE_URL = f"http://{config.network.host}:{config.network.port}"
TEST_PAYLOAD = {"firstName": "Ada", "lastName": "Lovelace"}


def send_demo_request(raw_key):
    """Encrypt the test payload and post it to the demo endpoint."""
    print("\n=== Testing Demo Endpoint ===")

    body = aes_encrypt(raw_key, json.dumps(TEST_PAYLOAD).encode())
    print(f"Request envelope: {body}")

    response = requests.post(f"{BASE_URL}/api/v1/demo", json={"body": body})

    print(f"Response Status: {response.status_code}")
    try:
        content = response.json()
    except json.JSONDecodeError:
        print(f"Response (not JSON): {response.text}")
        return None

    print(f"Response: {content}")
    return content


def main():
    print("🚀 Starting Demo Request")

    raw_key = key_bytes(config.encryption.key)
    if raw_key is None:
        print("❌ Configured key must be 16, 24 or 32 bytes")
        return

    content = send_demo_request(raw_key)
    if not content or not content.get("Success"):
        print("❌ Demo request failed")
        return

    decrypted = json.loads(aes_decrypt(raw_key, content["Data"]["body"]))
    print(f"Decrypted response: {decrypted}")

    if decrypted == TEST_PAYLOAD:
        print("✅ Round trip verified - response matches the request payload!")
    else:
        print("❌ Round trip check failed - payloads don't match!")


if __name__ == "__main__":
    main()
