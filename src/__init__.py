"""Event Photo Service Package."""

__version__ = "1.0.0"
__author__ = "Bharat kumar"
__description__ = (
    "Serverless event photo upload/download using AWS Lambda, R2 (S3 API), and DynamoDB"
)

__all__ = ["handlers", "core"]
