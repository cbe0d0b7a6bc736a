from contextlib import closing

from botocore.exceptions import BotoCoreError, ClientError

from image_resizer.errors import (
    AccessDenied,
    InvalidRecordError,
    ObjectNotFound,
    TransientStorageError,
)

NOT_FOUND_CODES = {"NoSuchKey", "NoSuchBucket", "NotFound", "404"}
# PermanentRedirect is what S3 answers when the bucket lives in another region
ACCESS_DENIED_CODES = {
    "AccessDenied",
    "AllAccessDisabled",
    "Forbidden",
    "PermanentRedirect",
    "301",
    "403",
}


def _translate(error, bucket, key):
    code = error.response.get("Error", {}).get("Code", "")
    message = f"s3://{bucket}/{key}: {error}"

    if code in NOT_FOUND_CODES:
        return ObjectNotFound(message)
    elif code in ACCESS_DENIED_CODES:
        return AccessDenied(message)
    else:
        return TransientStorageError(message)


def fetch_object(client, bucket, key):
    if not bucket or not key:
        raise InvalidRecordError(
            f"Notification record is missing its bucket or key ({bucket!r}, {key!r})"
        )

    try:
        response = client.get_object(Bucket=bucket, Key=key)
    except ClientError as e:
        raise _translate(e, bucket, key) from e
    except BotoCoreError as e:
        raise TransientStorageError(f"s3://{bucket}/{key}: {e}") from e

    with closing(response["Body"]) as body:
        try:
            return body.read()
        except BotoCoreError as e:
            raise TransientStorageError(f"s3://{bucket}/{key}: {e}") from e


def store_object(client, bucket, key, data, content_type):
    try:
        client.put_object(Bucket=bucket, Key=key, Body=data, ContentType=content_type)
    except ClientError as e:
        raise _translate(e, bucket, key) from e
    except BotoCoreError as e:
        raise TransientStorageError(f"s3://{bucket}/{key}: {e}") from e
