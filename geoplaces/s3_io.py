"""S3 I/O helpers for reading and publishing boundary datasets."""

import boto3
import json
import logging

from botocore.exceptions import ClientError

logger = logging.getLogger(__name__)


class S3IO:
    def __init__(self, bucket, prefix='', client=None):
        self.s3 = client or boto3.client('s3')
        self.bucket = bucket
        self.prefix = prefix

    def _key(self, path):
        return f'{self.prefix}{path}'

    def exists(self, path):
        try:
            self.s3.head_object(Bucket=self.bucket, Key=self._key(path))
            return True
        except ClientError:
            return False

    def load_json(self, path):
        """Read and parse a JSON object from S3. Errors propagate."""
        obj = self.s3.get_object(Bucket=self.bucket, Key=self._key(path))
        return json.loads(obj['Body'].read().decode('utf-8'))

    def write_json(self, path, data):
        """Write JSON file to S3 with cache headers."""
        key = self._key(path)
        self.s3.put_object(
            Bucket=self.bucket,
            Key=key,
            Body=json.dumps(data, separators=(',', ':')).encode('utf-8'),
            ContentType='application/json',
            CacheControl='public, max-age=86400',
        )
        logger.info(f'Wrote s3://{self.bucket}/{key}')
