#!/usr/bin/env python3
"""
Seed script that uploads a directory of photos to an event via the API.

Run:
    python seed/seed_photos.py \
      --base-url <API-BASE-URL> \
      --event-id <EVENT-ID> \
      --photos-dir <DIRECTORY> \
      --verify
"""

import argparse
import mimetypes
import sys
from pathlib import Path
from typing import Any, cast

import requests
from aws_lambda_powertools import Logger

logger = Logger(service="seed")

PHOTO_SUFFIXES = frozenset({".jpg", ".jpeg", ".png", ".gif", ".webp", ".heic"})


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Seed event photos via the photo API")

    parser.add_argument(
        "--base-url",
        required=True,
        help="API base URL serving /upload and /download/{photoId}",
    )
    parser.add_argument(
        "--event-id",
        required=True,
        help="Event the photos are uploaded to",
    )
    parser.add_argument(
        "--photos-dir",
        type=Path,
        default=Path(__file__).parent / "photos",
        help="Directory containing the photos to upload",
    )
    parser.add_argument(
        "--limit",
        type=int,
        default=None,
        help="Maximum number of photos to upload",
    )
    parser.add_argument(
        "--verify",
        action="store_true",
        help="Download every uploaded photo and compare the bytes",
    )

    return parser.parse_args()


def find_photos(photos_dir: Path, limit: int | None = None) -> list[Path]:
    photos = sorted(
        path
        for path in photos_dir.iterdir()
        if path.is_file() and path.suffix.lower() in PHOTO_SUFFIXES
    )
    return photos[:limit] if limit is not None else photos


def upload_photo(base_url: str, event_id: str, path: Path) -> dict[str, Any]:
    content_type = mimetypes.guess_type(path.name)[0] or "image/jpeg"

    with open(path, "rb") as f:
        response = requests.post(
            f"{base_url.rstrip('/')}/upload",
            files={"photo": (path.name, f, content_type)},
            data={"eventId": event_id},
            timeout=30,
        )

    response.raise_for_status()
    return cast(dict[str, Any], response.json())


def verify_download(base_url: str, photo_id: str, expected: bytes) -> bool:
    response = requests.get(f"{base_url.rstrip('/')}/download/{photo_id}", timeout=30)
    response.raise_for_status()
    return response.content == expected


def seed_photos() -> None:
    try:
        args = parse_args()
        photos = find_photos(args.photos_dir, args.limit)

        logger.info(
            "Starting seeding process",
            extra={"base_url": args.base_url, "event_id": args.event_id, "count": len(photos)},
        )

        failures = 0

        for path in photos:
            try:
                body = upload_photo(args.base_url, args.event_id, path)
            except requests.RequestException as exc:
                failures += 1
                logger.error(
                    "Failed to seed photo",
                    extra={"photo": path.name, "error": str(exc)},
                )
                continue

            photo_id = body.get("photoId")
            logger.info(
                "Seeded photo",
                extra={"photo": path.name, "photo_id": photo_id, "url": body.get("url")},
            )

            if args.verify and photo_id:
                if not verify_download(args.base_url, photo_id, path.read_bytes()):
                    failures += 1
                    logger.error(
                        "Downloaded bytes differ from upload",
                        extra={"photo": path.name, "photo_id": photo_id},
                    )

        logger.info("Seeding completed", extra={"failures": failures})

        if failures:
            sys.exit(1)

    except Exception as exc:
        logger.exception("Seeding failed", exc_info=exc)
        sys.exit(1)


if __name__ == "__main__":
    seed_photos()
