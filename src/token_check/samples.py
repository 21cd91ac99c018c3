# Example tokens, one per recognized shape
SAMPLES = {
    "uuidv4": "550e8400-e29b-41d4-a716-446655440000",
    "hex32": "3f1a0b2c9d7e4a1f0c5b6d8e2a7c9b1d",
    "b64": "QWxhZGRpbjpvcGVuIHNlc2FtZQ==",
    "alnum16": "A7kLw39mQp8Zr2Tx",
    "alnum32": "G5hQmT9Zs1BcK8rV2xY4nP7uD3jL6wEa",
}


def get_sample(name: str) -> str:
    if name not in SAMPLES:
        raise KeyError(f"Unknown sample '{name}'. Choose from: {', '.join(SAMPLES)}")
    return SAMPLES[name]
