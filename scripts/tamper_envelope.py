from aes_demo.core.aes import join_envelope, split_envelope


def tamper_envelope(envelope: str, offset: int = 0) -> str:
    iv, ciphertext = split_envelope(envelope)
    corrupted = bytearray(ciphertext)
    corrupted[offset % len(corrupted)] ^= 0x01
    return join_envelope(iv, bytes(corrupted))


if __name__ == "__main__":
    import argparse

    def parse_args():
        parser = argparse.ArgumentParser(
            description="Simulate ciphertext tampering by flipping one byte"
        )
        parser.add_argument("envelope", type=str, help="iv:ciphertext envelope")
        parser.add_argument(
            "--offset", type=int, default=0, help="Ciphertext byte to flip"
        )
        return parser.parse_args()

    args = parse_args()
    print(tamper_envelope(args.envelope, args.offset))
