"""Private S3 buckets for website content and CloudFront access logs."""

from aws_cdk import RemovalPolicy
from aws_cdk import aws_s3 as s3
from constructs import Construct


class ContentBucket(Construct):
  """Encrypted, non-public S3 bucket holding the site's static files.

  Objects are only ever read through CloudFront; the distribution adds its
  own scoped grant when the bucket is bound as an origin.
  """

  def __init__(
    self,
    scope: Construct,
    id: str,
    *,
    bucket_name: str,
    object_acl: str = "owner-full-control",
    include_wildcard: bool = False,
    enable_access_logs: bool = False,
    removal_policy: RemovalPolicy = RemovalPolicy.RETAIN,
  ) -> None:
    super().__init__(scope, id)

    auto_delete = removal_policy == RemovalPolicy.DESTROY

    if object_acl == "disabled":
      access_control = None
      object_ownership = s3.ObjectOwnership.BUCKET_OWNER_ENFORCED
    else:
      access_control = s3.BucketAccessControl.BUCKET_OWNER_FULL_CONTROL
      object_ownership = s3.ObjectOwnership.BUCKET_OWNER_PREFERRED

    allowed_origins = [f"https://{bucket_name}"]
    if include_wildcard:
      allowed_origins.append(f"https://*.{bucket_name}")

    self.bucket = s3.Bucket(
      self,
      "Bucket",
      bucket_name=bucket_name,
      access_control=access_control,
      object_ownership=object_ownership,
      encryption=s3.BucketEncryption.S3_MANAGED,
      block_public_access=s3.BlockPublicAccess.BLOCK_ALL,
      enforce_ssl=True,
      cors=[
        s3.CorsRule(
          allowed_methods=[s3.HttpMethods.GET, s3.HttpMethods.HEAD],
          allowed_origins=allowed_origins,
        )
      ],
      removal_policy=removal_policy,
      auto_delete_objects=auto_delete,
    )

    self.log_bucket: s3.Bucket | None = None
    if enable_access_logs:
      # CloudFront standard logging writes objects with ACLs
      self.log_bucket = s3.Bucket(
        self,
        "AccessLogs",
        object_ownership=s3.ObjectOwnership.OBJECT_WRITER,
        encryption=s3.BucketEncryption.S3_MANAGED,
        block_public_access=s3.BlockPublicAccess.BLOCK_ALL,
        enforce_ssl=True,
        removal_policy=removal_policy,
        auto_delete_objects=auto_delete,
      )
