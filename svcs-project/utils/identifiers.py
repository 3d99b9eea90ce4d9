# What it does: Generates the random identifier used to name a commit's temporary staging directory
# How it does: Takes 16 bytes (128 bits) from the operating system's CSPRNG and formats them in the canonical 8-4-4-4-12 UUID layout
# What data structure it uses: Bytes

import secrets

def generate_uuid(): # Returns a random UUID-like string such as '1f0c...-....-....-....-............'
    raw = secrets.token_bytes(16)
    return '-'.join(raw[start:end].hex() for start, end in ((0, 4), (4, 6), (6, 8), (8, 10), (10, 16)))
