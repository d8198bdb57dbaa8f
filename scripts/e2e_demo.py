#!/usr/bin/env python3
"""
End-to-end demo script for the S3 File API.

Prerequisites:
    1. API running: uvicorn app.main:app
    2. S3_ACCESS_KEY / S3_SECRET_KEY / S3_BUCKET set in .env
    3. Readiness green: curl localhost:8000/health/ready

Usage:
    python scripts/e2e_demo.py

    # With a custom file:
    python scripts/e2e_demo.py --file path/to/report.pdf

    # Keep the uploaded object:
    python scripts/e2e_demo.py --keep
"""

import argparse
import json
import sys
from pathlib import Path

import httpx

# Configuration
API_BASE = "http://localhost:8000"
FILES_API = f"{API_BASE}/api/v1/files"
DEFAULT_CONTENT = b"hello from the e2e demo\n"


def check_readiness(client: httpx.Client) -> dict:
    """Check readiness of the storage backend."""
    try:
        resp = client.get(f"{API_BASE}/health/ready")
        return resp.json()
    except httpx.RequestError as e:
        return {"error": str(e)}


def upload(client: httpx.Client, name: str, content: bytes) -> dict:
    files = {"file": (name, content, "application/octet-stream")}
    resp = client.post(f"{FILES_API}/upload", files=files)
    resp.raise_for_status()
    return resp.json()


def download(client: httpx.Client, key: str) -> bytes:
    resp = client.get(f"{FILES_API}/download/{key}")
    resp.raise_for_status()
    return resp.content


def presigned_url(client: httpx.Client, key: str) -> str:
    resp = client.get(f"{FILES_API}/presigned-url/{key}")
    resp.raise_for_status()
    return resp.text


def list_files(client: httpx.Client) -> list[dict]:
    resp = client.get(f"{FILES_API}/list")
    resp.raise_for_status()
    return resp.json()


def delete(client: httpx.Client, key: str) -> str:
    resp = client.delete(f"{FILES_API}/delete/{key}")
    resp.raise_for_status()
    return resp.text


def main():
    parser = argparse.ArgumentParser(description="E2E demo for the S3 File API")
    parser.add_argument("--file", type=Path, help="File to upload (default: small generated text)")
    parser.add_argument("--keep", action="store_true", help="Do not delete the uploaded object")
    args = parser.parse_args()

    if args.file:
        if not args.file.exists():
            print(f"File not found: {args.file}")
            sys.exit(1)
        name, content = args.file.name, args.file.read_bytes()
    else:
        name, content = "e2e-demo.txt", DEFAULT_CONTENT

    with httpx.Client(timeout=30.0) as client:
        print("Checking readiness...")
        ready = check_readiness(client)
        print(json.dumps(ready, indent=2))
        if ready.get("status") != "ok":
            print("API is not ready, aborting")
            sys.exit(1)

        try:
            result = upload(client, name, content)
            key = result["key"]
            print(f"Uploaded {name} as {key}")
            print(f"Presigned URL: {result['url']}")

            data = download(client, key)
            if data != content:
                print("Downloaded bytes do not match the upload")
                sys.exit(1)
            print(f"Downloaded {len(data)} bytes, content matches")

            print(f"Fresh presigned URL: {presigned_url(client, key)}")

            listing = list_files(client)
            print(f"Bucket holds {len(listing)} object(s)")
            entry = next((item for item in listing if item["key"] == key), None)
            print(json.dumps(entry, indent=2))

            if not args.keep:
                print(delete(client, key))
                # A second delete must still succeed
                print(delete(client, key))
        except httpx.HTTPStatusError as e:
            print(f"Request failed: {e.response.status_code} {e.response.text}")
            sys.exit(1)


if __name__ == "__main__":
    main()
