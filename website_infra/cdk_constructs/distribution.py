"""CloudFront distribution for static website."""

from aws_cdk import aws_certificatemanager as acm
from aws_cdk import aws_cloudfront as cloudfront
from aws_cdk import aws_cloudfront_origins as origins
from aws_cdk import aws_s3 as s3
from constructs import Construct


class EdgeDistribution(Construct):
  """CloudFront distribution reading a private S3 bucket through OAC.

  The origin access control signs every origin request (SigV4), and the
  bucket policy it generates only admits the CloudFront service principal
  when the source ARN is this distribution.
  """

  def __init__(
    self,
    scope: Construct,
    id: str,
    *,
    bucket: s3.IBucket,
    certificate: acm.ICertificate,
    domain_names: list[str],
    origin_shield_region: str,
    error_page_path: str = "/404.html",
    log_bucket: s3.IBucket | None = None,
  ) -> None:
    super().__init__(scope, id)

    self.origin_access_control = cloudfront.S3OriginAccessControl(
      self,
      "OriginAccessControl",
      description=f"OAC for {domain_names[0]}",
      signing=cloudfront.Signing.SIGV4_ALWAYS,
    )

    origin = origins.S3BucketOrigin.with_origin_access_control(
      bucket,
      origin_access_control=self.origin_access_control,
      origin_access_levels=[cloudfront.AccessLevel.READ],
      origin_shield_enabled=True,
      origin_shield_region=origin_shield_region,
    )

    self.distribution = cloudfront.Distribution(
      self,
      "Distribution",
      default_behavior=cloudfront.BehaviorOptions(
        origin=origin,
        viewer_protocol_policy=cloudfront.ViewerProtocolPolicy.REDIRECT_TO_HTTPS,
        allowed_methods=cloudfront.AllowedMethods.ALLOW_GET_HEAD_OPTIONS,
        cached_methods=cloudfront.CachedMethods.CACHE_GET_HEAD_OPTIONS,
        origin_request_policy=cloudfront.OriginRequestPolicy.CORS_S3_ORIGIN,
        compress=False,
      ),
      domain_names=domain_names,
      certificate=certificate,
      ssl_support_method=cloudfront.SSLMethod.SNI,
      minimum_protocol_version=cloudfront.SecurityPolicyProtocol.TLS_V1_2_2021,
      default_root_object="index.html",
      error_responses=[
        cloudfront.ErrorResponse(
          http_status=404,
          response_http_status=404,
          response_page_path=error_page_path,
        )
      ],
      enable_logging=log_bucket is not None,
      log_bucket=log_bucket,
      comment=f"Static website {domain_names[0]}",
    )
