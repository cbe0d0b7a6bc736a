import logging

import boto3

from image_resizer.config import load_settings
from image_resizer.events import parse_records
from image_resizer.resize import (
    content_type_for,
    decode_image,
    encode_image,
    resize_image,
)
from image_resizer.storage import fetch_object, store_object

settings = load_settings()

logger = logging.getLogger()
logger.setLevel(settings.log_level)

s3_client = boto3.client("s3")


def resize_object(client, record, settings):
    data = fetch_object(client, record.bucket, record.key)

    with decode_image(data) as image:
        with resize_image(image, settings.bounds) as resized:
            output = encode_image(
                resized, settings.output_format, settings.output_quality
            )
            logger.info(
                "Resized s3://%s/%s from %sx%s to %sx%s",
                record.bucket,
                record.key,
                image.width,
                image.height,
                resized.width,
                resized.height,
            )

    store_object(
        client,
        record.bucket,
        record.key,
        output,
        content_type_for(settings.output_format),
    )


def process_records(client, records, settings):
    for record in records:
        try:
            resize_object(client, record, settings)
        except Exception:
            logger.exception(
                "Error getting object %s from bucket %s. Make sure they exist "
                "and your bucket is in the same region as this function.",
                record.key,
                record.bucket,
                extra={"bucket": record.bucket, "key": record.key},
            )
            raise


def handler(event, context):
    process_records(s3_client, parse_records(event), settings)
