"""CDK infrastructure for hosting a static website on S3 and CloudFront."""
