from __future__ import annotations
import hashlib

def hash_hex(s: bytes) -> str: return hashlib.blake2b(s, digest_size=16).hexdigest()

def seed_for_text(text: str, salt: str = "rooms_v1") -> int:
    return int.from_bytes(hashlib.blake2b((text + '|' + salt).encode(), digest_size=8).digest(), 'big')
