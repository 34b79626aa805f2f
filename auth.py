import bcrypt

PIN_HASH_ROUNDS = 10

def hash_pin(pin: str) -> str:
    # Hash a plaintext mobile-app PIN using bcrypt.
    return bcrypt.hashpw(pin.encode('utf-8'), bcrypt.gensalt(rounds=PIN_HASH_ROUNDS)).decode('utf-8')

def verify_pin(plain_pin: str, pin_hash: str) -> bool:
    # Verify a plaintext PIN against a stored hash.
    return bcrypt.checkpw(plain_pin.encode('utf-8'), pin_hash.encode('utf-8'))
