"""Pytest fixtures for CDK construct tests."""

from pathlib import Path

import aws_cdk as cdk
import pytest

from website_infra.config import DeployContext

TEST_ACCOUNT = "123456789012"


@pytest.fixture
def app() -> cdk.App:
  """Create a CDK App for testing."""
  return cdk.App()


@pytest.fixture
def context() -> DeployContext:
  """Deploy context with a fixed account so lookups can synthesize."""
  return DeployContext(account=TEST_ACCOUNT, region="us-east-1")


@pytest.fixture
def stack(app: cdk.App, context: DeployContext) -> cdk.Stack:
  """Create a CDK Stack for testing."""
  return cdk.Stack(
    app,
    "TestStack",
    env=cdk.Environment(account=context.account, region=context.region),
  )


@pytest.fixture
def asset_dir(tmp_path: Path) -> Path:
  """A small static site on disk."""
  site = tmp_path / "site"
  site.mkdir()
  (site / "index.html").write_text("<h1>hello</h1>")
  (site / "404.html").write_text("<h1>not found</h1>")
  return site
