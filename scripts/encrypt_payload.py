import json

from aes_demo.core.aes import aes_decrypt, aes_encrypt, key_bytes
from aes_demo.shared import load_config

config = load_config()


def encrypt_payload(key: str, payload: dict) -> str:
    raw_key = key_bytes(key)
    if raw_key is None:
        raise SystemExit("[!] Key must be 16, 24 or 32 bytes")
    return aes_encrypt(raw_key, json.dumps(payload, separators=(",", ":")).encode())


def decrypt_envelope(key: str, envelope: str) -> dict:
    raw_key = key_bytes(key)
    if raw_key is None:
        raise SystemExit("[!] Key must be 16, 24 or 32 bytes")
    return json.loads(aes_decrypt(raw_key, envelope))


if __name__ == "__main__":
    import argparse

    def parse_args():
        parser = argparse.ArgumentParser(
            description="Encrypt a JSON payload into an iv:ciphertext envelope"
        )
        parser.add_argument("data", type=str, help="JSON object, or an envelope with --decrypt")
        parser.add_argument("--key", type=str, help="Shared key override")
        parser.add_argument(
            "--decrypt", action="store_true", help="Decrypt an envelope instead"
        )
        return parser.parse_args()

    args = parse_args()
    key = args.key or config.encryption.key

    if args.decrypt:
        print(json.dumps(decrypt_envelope(key, args.data), indent=2))
    else:
        print(encrypt_payload(key, json.loads(args.data)))
