"""Configuration loader for static website stacks."""

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import boto3
import yaml
from aws_cdk import RemovalPolicy

from website_infra.errors import ConfigurationError

logger = logging.getLogger(__name__)

ZONE_STRATEGIES = ("lookup", "import", "create")
OBJECT_ACL_MODES = ("owner-full-control", "disabled")

# CloudFront only accepts ACM certificates issued in us-east-1, and the
# certificate lives in the same stack as the distribution.
CERTIFICATE_REGION = "us-east-1"

PROFILES: dict[str, dict[str, Any]] = {
  "shared-zone": {
    "zone_strategy": "lookup",
    "include_wildcard": True,
    "object_acl": "owner-full-control",
    "enable_access_logs": True,
    "restrict_caa": False,
  },
  "dedicated-zone": {
    "zone_strategy": "create",
    "include_wildcard": False,
    "object_acl": "disabled",
    "enable_access_logs": False,
    "restrict_caa": True,
  },
}

BOOLEAN_FIELDS = (
  "restrict_caa",
  "include_wildcard",
  "include_ipv6",
  "prune",
  "invalidate_on_deploy",
  "enable_access_logs",
)

REMOVAL_POLICIES = {
  "retain": RemovalPolicy.RETAIN,
  "destroy": RemovalPolicy.DESTROY,
  "snapshot": RemovalPolicy.SNAPSHOT,
}


@dataclass(frozen=True)
class DeployContext:
  """Account and region a site stack is synthesized for."""

  account: str
  region: str = CERTIFICATE_REGION

  @classmethod
  def from_environment(cls, region: str = CERTIFICATE_REGION) -> "DeployContext":
    """Resolve the account from the CDK CLI environment or STS."""
    account = os.environ.get("CDK_DEFAULT_ACCOUNT")
    if not account:
      sts = boto3.client("sts")
      account = str(sts.get_caller_identity()["Account"])
    return cls(account=account, region=region)


@dataclass
class SiteConfig:
  """Configuration for a single static website.

  Fields left as None take their value from the named profile.
  """

  domain: str
  owner: str = ""
  email: str = ""
  profile: str = "shared-zone"
  zone_strategy: str | None = None
  zone_name: str | None = None
  hosted_zone_id: str | None = None
  restrict_caa: bool | None = None
  include_wildcard: bool | None = None
  include_ipv6: bool = False
  object_acl: str | None = None
  error_page_path: str = "/404.html"
  asset_dir: str = "./site"
  prune: bool = True
  invalidate_on_deploy: bool = True
  enable_access_logs: bool | None = None
  removal_policy: RemovalPolicy = RemovalPolicy.RETAIN
  region: str = CERTIFICATE_REGION

  def __post_init__(self) -> None:
    self.domain = (self.domain or "").strip().lower()
    if not self.domain:
      raise ConfigurationError("Site domain cannot be empty")
    if self.profile not in PROFILES:
      raise ConfigurationError(
        f"Unknown profile '{self.profile}' for {self.domain}, "
        f"expected one of: {', '.join(PROFILES)}"
      )
    for name, value in PROFILES[self.profile].items():
      if getattr(self, name) is None:
        setattr(self, name, value)

    for name in BOOLEAN_FIELDS:
      value = getattr(self, name)
      if not isinstance(value, bool):
        raise ConfigurationError(
          f"{name} must be true or false for {self.domain}, got {value!r}"
        )
    if self.zone_strategy not in ZONE_STRATEGIES:
      raise ConfigurationError(
        f"Unknown zone_strategy '{self.zone_strategy}' for {self.domain}, "
        f"expected one of: {', '.join(ZONE_STRATEGIES)}"
      )
    if self.zone_strategy == "import" and not self.hosted_zone_id:
      raise ConfigurationError(
        f"zone_strategy 'import' requires hosted_zone_id for {self.domain}"
      )
    if self.object_acl not in OBJECT_ACL_MODES:
      raise ConfigurationError(
        f"Unknown object_acl '{self.object_acl}' for {self.domain}, "
        f"expected one of: {', '.join(OBJECT_ACL_MODES)}"
      )
    if not self.error_page_path.startswith("/"):
      raise ConfigurationError(
        f"error_page_path must start with '/', got '{self.error_page_path}'"
      )
    if self.region != CERTIFICATE_REGION:
      raise ConfigurationError(
        f"Site {self.domain} must deploy to {CERTIFICATE_REGION} "
        f"(CloudFront certificates), got {self.region}"
      )

  @property
  def hosted_zone_name(self) -> str:
    """DNS zone that holds the site's records."""
    return self.zone_name or self.domain

  @property
  def stack_name(self) -> str:
    return f"StaticWebsite-{self.domain.replace('.', '-')}"


@dataclass
class Config:
  """Multi-site configuration."""

  sites: list[SiteConfig] = field(default_factory=list)

  @classmethod
  def from_yaml(cls, path: Path | str = "sites.yaml") -> "Config":
    """Load configuration from YAML file."""
    with open(path) as f:
      data = yaml.safe_load(f) or {}

    defaults = data.get("defaults", {})
    sites: list[SiteConfig] = []

    for site_data in data.get("sites", []):
      sites.append(cls._build_site(defaults, site_data))

    logger.info("Loaded %d site(s) from %s", len(sites), path)
    return cls(sites=sites)

  @staticmethod
  def _build_site(defaults: dict[str, Any], site_data: dict[str, Any]) -> SiteConfig:
    # Defaults < profile < site entry
    profile_name = site_data.get("profile", defaults.get("profile", "shared-zone"))
    if profile_name not in PROFILES:
      raise ConfigurationError(
        f"Unknown profile '{profile_name}' for {site_data.get('domain')}, "
        f"expected one of: {', '.join(PROFILES)}"
      )
    merged = {**defaults, **PROFILES[profile_name], **site_data}

    if "domain" not in merged:
      raise ConfigurationError("Site entry missing required field 'domain'")

    # Convert removal_policy string to enum
    removal_policy_str = str(merged.pop("removal_policy", "retain")).lower()
    if removal_policy_str not in REMOVAL_POLICIES:
      raise ConfigurationError(
        f"Unknown removal_policy '{removal_policy_str}', "
        f"expected one of: {', '.join(REMOVAL_POLICIES)}"
      )

    return SiteConfig(
      domain=merged["domain"],
      owner=merged.get("owner", ""),
      email=merged.get("email", ""),
      profile=profile_name,
      zone_strategy=merged.get("zone_strategy"),
      zone_name=merged.get("zone_name"),
      hosted_zone_id=merged.get("hosted_zone_id"),
      restrict_caa=merged.get("restrict_caa"),
      include_wildcard=merged.get("include_wildcard"),
      include_ipv6=merged.get("include_ipv6", False),
      object_acl=merged.get("object_acl"),
      error_page_path=merged.get("error_page_path", "/404.html"),
      asset_dir=merged.get("asset_dir", "./site"),
      prune=merged.get("prune", True),
      invalidate_on_deploy=merged.get("invalidate_on_deploy", True),
      enable_access_logs=merged.get("enable_access_logs"),
      removal_policy=REMOVAL_POLICIES[removal_policy_str],
      region=merged.get("region", CERTIFICATE_REGION),
    )
