"""CDK stack for a single static website."""

from typing import Any

import aws_cdk as cdk
from constructs import Construct

from website_infra.cdk_constructs import StaticWebsite
from website_infra.config import DeployContext, SiteConfig


class StaticWebsiteStack(cdk.Stack):
  """Stack for a single static website."""

  def __init__(
    self,
    scope: Construct,
    id: str,
    *,
    site_config: SiteConfig,
    context: DeployContext,
    **kwargs: Any,
  ) -> None:
    kwargs.setdefault(
      "env", cdk.Environment(account=context.account, region=context.region)
    )
    super().__init__(scope, id, **kwargs)

    self.site = StaticWebsite(
      self,
      "Site",
      site_config=site_config,
      context=context,
    )

    # Tag resources with owner info
    if site_config.owner:
      cdk.Tags.of(self).add("Owner", site_config.owner)
    if site_config.email:
      cdk.Tags.of(self).add("OwnerEmail", site_config.email)
    cdk.Tags.of(self).add("Project", "static-website")
    cdk.Tags.of(self).add("Domain", site_config.domain)
