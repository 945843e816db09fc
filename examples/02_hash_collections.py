#!/usr/bin/env python3
"""
02_hash_collections.py - Full and partial checksums for one download

Demonstrates:
- Validating checksums from untrusted sources
- Appending chunk hashes as they arrive
- Saving and restoring a collection through its record form
- The Want-Digest value offered to servers
"""

import json

from linkprint import WANT_DIGEST, Hash, HashCollection, InvalidHashError

CHUNK_SIZE = 4 * 1024 * 1024


def main() -> None:
    print(f"Want-Digest: {WANT_DIGEST}\n")

    full = Hash.from_text(
        "CF83E135 7EEFB8BD F1542850 D66D8007 D620E405 0B5715DC 83F4A921 D36CE9CE"
        " 47D0D13C 5D85F2B0 FF8318D2 877EEC2F 63B931BD 47417A81 A538327A F927DA3E",
        "SHA-512",
    )
    print(f"Full hash: {full}")

    try:
        Hash.from_text("not-a-checksum", "md5")
    except InvalidHashError as e:
        print(f"Rejected: {e}")

    collection = HashCollection(full, par_length=CHUNK_SIZE)
    for chunk in range(3):
        collection.add(Hash.from_text(f"{chunk:040x}", "sha1"))

    record = collection.to_record()
    print("\nSerialized collection:")
    print(json.dumps(record, indent=2))

    restored = HashCollection.load(json.loads(json.dumps(record)))
    print(f"\nRestored equals original: {restored == collection}")
    print(f"Partial hashes: {len(restored.partials)}")


if __name__ == "__main__":
    main()
