"""Tests for the AssetPublisher construct."""

from pathlib import Path

import aws_cdk as cdk
import pytest
from aws_cdk import aws_s3 as s3
from aws_cdk.assertions import Match, Template

from website_infra.cdk_constructs import AssetPublisher, resolve_asset_dir
from website_infra.errors import AssetSourceNotFoundError


class TestResolveAssetDir:
  """Validation of the local asset directory."""

  def test_returns_existing_directory(self, asset_dir: Path) -> None:
    assert resolve_asset_dir(asset_dir) == asset_dir

  def test_accepts_nested_files_only(self, tmp_path: Path) -> None:
    nested = tmp_path / "site" / "css"
    nested.mkdir(parents=True)
    (nested / "style.css").write_text("body {}")
    assert resolve_asset_dir(tmp_path / "site") == tmp_path / "site"

  def test_missing_directory(self, tmp_path: Path) -> None:
    with pytest.raises(AssetSourceNotFoundError, match="Asset source not found"):
      resolve_asset_dir(tmp_path / "missing")

  def test_file_instead_of_directory(self, tmp_path: Path) -> None:
    path = tmp_path / "index.html"
    path.write_text("<h1>hi</h1>")
    with pytest.raises(AssetSourceNotFoundError):
      resolve_asset_dir(path)

  def test_directory_with_only_subdirectories(self, tmp_path: Path) -> None:
    (tmp_path / "site" / "empty").mkdir(parents=True)
    with pytest.raises(AssetSourceNotFoundError, match="no files"):
      resolve_asset_dir(tmp_path / "site")


class TestAssetPublisher:
  """BucketDeployment wiring."""

  def test_deploys_without_invalidation(
    self, stack: cdk.Stack, asset_dir: Path
  ) -> None:
    bucket = s3.Bucket(stack, "Bucket")
    AssetPublisher(stack, "Assets", asset_dir=asset_dir, bucket=bucket, prune=False)
    template = Template.from_stack(stack)

    template.has_resource_properties(
      "Custom::CDKBucketDeployment",
      {
        "Prune": False,
        "DestinationBucketName": {"Ref": Match.string_like_regexp("Bucket")},
        "DistributionId": Match.absent(),
      },
    )

  def test_missing_source_fails_before_synthesis(
    self, stack: cdk.Stack, tmp_path: Path
  ) -> None:
    bucket = s3.Bucket(stack, "Bucket")
    with pytest.raises(FileNotFoundError):
      AssetPublisher(stack, "Assets", asset_dir=tmp_path / "nope", bucket=bucket)
