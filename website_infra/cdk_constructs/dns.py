"""Route 53 hosted zone resolution and alias records."""

from aws_cdk import Annotations
from aws_cdk import aws_cloudfront as cloudfront
from aws_cdk import aws_route53 as route53
from aws_cdk import aws_route53_targets as targets
from constructs import Construct

from website_infra.errors import ConfigurationError


class DnsRecords(Construct):
  """Route 53 hosted zone (looked up, imported or created) and its records."""

  def __init__(
    self,
    scope: Construct,
    id: str,
    *,
    domain_name: str,
    zone_name: str | None = None,
    zone_strategy: str = "lookup",
    hosted_zone_id: str | None = None,
    restrict_caa: bool = False,
  ) -> None:
    super().__init__(scope, id)

    self.domain_name = domain_name
    self.zone_name = zone_name or domain_name
    self.created_zone: route53.PublicHostedZone | None = None

    if zone_strategy == "lookup":
      self.hosted_zone = route53.HostedZone.from_lookup(
        self,
        "HostedZone",
        domain_name=self.zone_name,
      )
    elif zone_strategy == "import":
      if not hosted_zone_id:
        raise ConfigurationError(
          f"Importing a hosted zone requires its id ({self.zone_name})"
        )
      self.hosted_zone = route53.HostedZone.from_hosted_zone_attributes(
        self,
        "HostedZone",
        hosted_zone_id=hosted_zone_id,
        zone_name=self.zone_name,
      )
    elif zone_strategy == "create":
      # caa_amazon adds a CAA record allowing only Amazon to issue certificates
      self.created_zone = route53.PublicHostedZone(
        self,
        "HostedZone",
        zone_name=self.zone_name,
        caa_amazon=restrict_caa,
        comment=f"Static website zone for {self.zone_name}",
      )
      self.hosted_zone = self.created_zone
      Annotations.of(self).add_info(
        f"Delegate {self.zone_name} at the registrar to the NameServers output "
        "of this stack, or certificate validation will not complete."
      )
    else:
      raise ConfigurationError(f"Unknown zone strategy: {zone_strategy}")

  def create_alias_records(
    self,
    distribution: cloudfront.IDistribution,
    include_wildcard: bool = False,
    include_ipv6: bool = False,
  ) -> list[route53.RecordSet]:
    """Create alias records pointing the apex (and `*`) at CloudFront."""
    target = route53.RecordTarget.from_alias(targets.CloudFrontTarget(distribution))

    names = [("Apex", self.domain_name)]
    if include_wildcard:
      names.append(("Wildcard", f"*.{self.domain_name}"))

    records: list[route53.RecordSet] = []
    for label, record_name in names:
      records.append(
        route53.ARecord(
          self,
          f"{label}AliasRecord",
          zone=self.hosted_zone,
          record_name=record_name,
          target=target,
        )
      )
      if include_ipv6:
        records.append(
          route53.AaaaRecord(
            self,
            f"{label}AliasRecordIpv6",
            zone=self.hosted_zone,
            record_name=record_name,
            target=target,
          )
        )
    return records
