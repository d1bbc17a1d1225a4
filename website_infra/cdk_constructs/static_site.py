"""Main composite construct for complete static website infrastructure."""

from aws_cdk import CfnOutput, Fn
from constructs import Construct

from website_infra.config import DeployContext, SiteConfig

from .certificate import DnsValidatedCertificate
from .distribution import EdgeDistribution
from .dns import DnsRecords
from .publisher import AssetPublisher
from .storage import ContentBucket


class StaticWebsite(Construct):
  """Complete static website infrastructure.

  Creates, in dependency order:
  - Route 53 hosted zone (looked up, imported or created)
  - ACM certificate (DNS validated)
  - S3 bucket for static content (+ optional access-log bucket)
  - CloudFront distribution with origin access control
  - Alias records for the apex (and wildcard) name
  - Deployment of the local asset directory
  """

  def __init__(
    self,
    scope: Construct,
    id: str,
    *,
    site_config: SiteConfig,
    context: DeployContext,
  ) -> None:
    super().__init__(scope, id)

    domain_name = site_config.domain

    self.dns = DnsRecords(
      self,
      "Dns",
      domain_name=domain_name,
      zone_name=site_config.hosted_zone_name,
      zone_strategy=site_config.zone_strategy,
      hosted_zone_id=site_config.hosted_zone_id,
      restrict_caa=site_config.restrict_caa,
    )

    self.certificate = DnsValidatedCertificate(
      self,
      "Certificate",
      domain_name=domain_name,
      hosted_zone=self.dns.hosted_zone,
      include_wildcard=site_config.include_wildcard,
    )

    # Bucket name must be the exact domain name
    self.bucket = ContentBucket(
      self,
      "Content",
      bucket_name=domain_name,
      object_acl=site_config.object_acl,
      include_wildcard=site_config.include_wildcard,
      enable_access_logs=site_config.enable_access_logs,
      removal_policy=site_config.removal_policy,
    )

    self.distribution = EdgeDistribution(
      self,
      "Edge",
      bucket=self.bucket.bucket,
      certificate=self.certificate.certificate,
      domain_names=self.certificate.domain_names,
      origin_shield_region=context.region,
      error_page_path=site_config.error_page_path,
      log_bucket=self.bucket.log_bucket,
    )

    self.records = self.dns.create_alias_records(
      distribution=self.distribution.distribution,
      include_wildcard=site_config.include_wildcard,
      include_ipv6=site_config.include_ipv6,
    )

    self.publisher = AssetPublisher(
      self,
      "Assets",
      asset_dir=site_config.asset_dir,
      bucket=self.bucket.bucket,
      distribution=(
        self.distribution.distribution if site_config.invalidate_on_deploy else None
      ),
      prune=site_config.prune,
    )

    # Outputs
    CfnOutput(
      self,
      "BucketName",
      value=self.bucket.bucket.bucket_name,
      description="S3 bucket name",
    )
    CfnOutput(
      self,
      "DistributionId",
      value=self.distribution.distribution.distribution_id,
      description="CloudFront distribution ID",
    )
    CfnOutput(
      self,
      "DistributionDomainName",
      value=self.distribution.distribution.distribution_domain_name,
      description="CloudFront distribution domain name",
    )
    CfnOutput(
      self,
      "CertificateArn",
      value=self.certificate.certificate.certificate_arn,
      description="ACM certificate ARN",
    )
    CfnOutput(
      self,
      "HostedZoneId",
      value=self.dns.hosted_zone.hosted_zone_id,
      description="Route 53 hosted zone ID",
    )
    if self.dns.created_zone is not None:
      CfnOutput(
        self,
        "NameServers",
        value=Fn.join(",", self.dns.created_zone.hosted_zone_name_servers or []),
        description="Name servers to delegate to at the registrar",
      )
