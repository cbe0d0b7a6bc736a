import io
import os

import pytest
from botocore.exceptions import ClientError
from botocore.response import StreamingBody
from PIL import Image

os.environ.setdefault("AWS_DEFAULT_REGION", "us-east-1")


def make_image(size, mode="RGB", fmt="JPEG", color="red") -> bytes:
    buffer = io.BytesIO()
    Image.new(mode, size, color).save(buffer, format=fmt)
    return buffer.getvalue()


def s3_event(*objects):
    return {
        "Records": [
            {
                "eventSource": "aws:s3",
                "eventName": "ObjectCreated:Put",
                "s3": {"bucket": {"name": bucket}, "object": {"key": key}},
            }
            for bucket, key in objects
        ]
    }


class FakeS3Client:
    """Stand-in for a boto3 S3 client that records every call."""

    def __init__(self, objects=None):
        self.objects = dict(objects or {})
        self.get_calls = []
        self.put_calls = []

    def get_object(self, Bucket, Key):
        self.get_calls.append((Bucket, Key))
        if (Bucket, Key) not in self.objects:
            raise ClientError(
                {
                    "Error": {
                        "Code": "NoSuchKey",
                        "Message": "The specified key does not exist.",
                    },
                    "ResponseMetadata": {"HTTPStatusCode": 404},
                },
                "GetObject",
            )

        data = self.objects[(Bucket, Key)]
        return {
            "Body": StreamingBody(io.BytesIO(data), len(data)),
            "ContentLength": len(data),
        }

    def put_object(self, Bucket, Key, Body, ContentType):
        self.put_calls.append((Bucket, Key, ContentType))
        self.objects[(Bucket, Key)] = Body
        return {"ETag": '"fake"'}


@pytest.fixture
def fake_s3():
    return FakeS3Client()
