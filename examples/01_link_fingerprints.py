#!/usr/bin/env python3
"""
01_link_fingerprints.py - Canonical URLs and embedded checksums

Demonstrates:
- Turning raw links into canonical, fragment-free identity keys
- Reading a link fingerprint (#hash(algorithm:digest)) from a URL
- Following a metalink reference (#!metalink4!target)
- Seeding a HashCollection from the fingerprint

Runs offline: nothing is downloaded.
"""

from linkprint import CanonicalURL, HashCollection, UnsupportedURLError
from linkprint.infrastructure.logging import configure_logger

SHA256_DIGEST = "e3b0c44298fc1c149afbf4c8996fb92427ae41e4649b934ca495991b7852b855"


def main() -> None:
    configure_logger()

    links = [
        f"https://example.com/releases/tool-1.0.iso#hash(sha-256:{SHA256_DIGEST})",
        "https://example.com/releases/tool-1.0.iso#!metalink4!tool-1.0.iso.meta4",
        "https://example.com/docs/%C3%BCbersicht.pdf#page=3",
        "gopher://example.com/1/tool",
    ]

    for link in links:
        print(f"Link: {link}")
        try:
            url = CanonicalURL(link)
        except UnsupportedURLError as e:
            print(f"  ✗ {e}\n")
            continue

        print(f"  URL:         {url.spec}")
        print(f"  Display:     {url.usable}")
        if url.fingerprint:
            collection = HashCollection.from_url(url)
            print(f"  Fingerprint: {url.fingerprint}")
            print(f"  Collection:  {collection.to_record()}")
        if url.metalink:
            print(f"  Metalink:    {url.metalink}")
        print()


if __name__ == "__main__":
    main()
