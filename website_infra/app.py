#!/usr/bin/env python3
"""CDK application entry point for static website infrastructure."""

import logging
from pathlib import Path

import aws_cdk as cdk

from website_infra.config import Config, DeployContext
from website_infra.stacks import StaticWebsiteStack

logger = logging.getLogger(__name__)


def main() -> None:
  """Create CDK app with a stack for each configured site."""
  logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")
  app = cdk.App()

  # Load configuration
  config_path = app.node.try_get_context("config") or "sites.yaml"
  config = Config.from_yaml(Path(config_path))

  for site in config.sites:
    context = DeployContext.from_environment(region=site.region)
    logger.info(
      "Declaring %s (profile=%s, zone=%s) in %s/%s",
      site.domain,
      site.profile,
      site.zone_strategy,
      context.account,
      context.region,
    )
    StaticWebsiteStack(
      app,
      site.stack_name,
      site_config=site,
      context=context,
      description=f"Static website infrastructure for {site.domain}",
    )

  app.synth()


if __name__ == "__main__":
  main()
