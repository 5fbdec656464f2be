import boto3
from botocore.exceptions import ClientError
import os
from datetime import datetime, timezone
from tracko.config import Settings
import logging

logger = logging.getLogger(__name__)

CONTENT_TYPES = {
    'pdf': 'application/pdf',
    'png': 'image/png',
    'jpg': 'image/jpeg',
    'jpeg': 'image/jpeg',
    'gif': 'image/gif',
    'bmp': 'image/bmp',
    'webp': 'image/webp',
    'tiff': 'image/tiff',
    'tif': 'image/tiff',
    'txt': 'text/plain',
    'csv': 'text/csv',
    'doc': 'application/msword',
    'docx': 'application/vnd.openxmlformats-officedocument.wordprocessingml.document',
}


def guess_content_type(filename: str) -> str:
    """Determine content type based on file extension"""
    ext = filename.lower().split('.')[-1] if '.' in filename else ''
    return CONTENT_TYPES.get(ext, 'application/octet-stream')


class StorageService:
    """Stores uploaded documents on local disk, or in S3-compatible storage when configured"""

    def __init__(self, settings: Settings):
        self.bucket_name = settings.storage_bucket_name

        # Require both access key and secret key to use S3
        if settings.storage_access_key_id and settings.storage_secret_access_key:
            s3_config = {
                'aws_access_key_id': settings.storage_access_key_id,
                'aws_secret_access_key': settings.storage_secret_access_key,
            }
            if settings.storage_endpoint_url:
                s3_config['endpoint_url'] = settings.storage_endpoint_url
            if settings.storage_region:
                s3_config['region_name'] = settings.storage_region

            try:
                self.s3_client = boto3.client('s3', **s3_config)
                logger.info("S3 storage initialized successfully")
            except Exception as e:
                logger.warning(f"Failed to initialize S3 client, falling back to local storage: {str(e)}")
                self.s3_client = None
        else:
            logger.info("No S3 credentials found, using local filesystem storage")
            self.s3_client = None

        self.local_storage_dir = os.path.abspath(settings.upload_dir)
        os.makedirs(self.local_storage_dir, exist_ok=True)
        logger.info(f"Local storage directory initialized: {self.local_storage_dir}")

    def _local_path(self, storage_path: str) -> str:
        # storage_path is "documents/<timestamp>_<filename>"
        return os.path.join(self.local_storage_dir, os.path.basename(storage_path))

    def upload_file(self, file_content: bytes, filename: str) -> str:
        """
        Upload a file and return its storage path

        Args:
            file_content: Binary content of the file
            filename: Original filename

        Returns:
            Storage path (S3 key, same format for local storage)
        """
        timestamp = datetime.now(timezone.utc).strftime("%Y%m%d_%H%M%S_%f")
        safe_name = os.path.basename(filename) or "upload"
        storage_key = f"documents/{timestamp}_{safe_name}"

        if self.s3_client:
            try:
                self.s3_client.put_object(
                    Bucket=self.bucket_name,
                    Key=storage_key,
                    Body=file_content,
                    ContentType=guess_content_type(safe_name)
                )
                return storage_key
            except ClientError as e:
                raise IOError(f"Failed to upload to S3: {str(e)}") from e

        local_path = self._local_path(storage_key)
        with open(local_path, 'wb') as f:
            f.write(file_content)
        logger.info(f"File saved to local storage: {local_path}")
        return storage_key

    def download_file(self, storage_path: str) -> bytes:
        """
        Read a stored file back

        Raises:
            FileNotFoundError: nothing is stored under storage_path
        """
        if self.s3_client:
            try:
                response = self.s3_client.get_object(Bucket=self.bucket_name, Key=storage_path)
                return response['Body'].read()
            except ClientError as e:
                if e.response.get('Error', {}).get('Code') in ('NoSuchKey', '404'):
                    raise FileNotFoundError(f"File not found: {storage_path}") from e
                raise IOError(f"Failed to download from S3: {str(e)}") from e

        local_file_path = self._local_path(storage_path)
        if not os.path.exists(local_file_path):
            raise FileNotFoundError(f"File not found: {local_file_path}")
        with open(local_file_path, 'rb') as f:
            return f.read()

    def delete_file(self, storage_path: str) -> None:
        if self.s3_client:
            try:
                self.s3_client.delete_object(Bucket=self.bucket_name, Key=storage_path)
            except ClientError as e:
                raise IOError(f"Failed to delete from S3: {str(e)}") from e
            return

        local_file_path = self._local_path(storage_path)
        if os.path.exists(local_file_path):
            os.remove(local_file_path)
            logger.info(f"File deleted from local storage: {local_file_path}")
