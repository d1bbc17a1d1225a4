"""Upload of local static files into the content bucket."""

from pathlib import Path

from aws_cdk import aws_cloudfront as cloudfront
from aws_cdk import aws_s3 as s3
from aws_cdk import aws_s3_deployment as s3_deploy
from constructs import Construct

from website_infra.errors import AssetSourceNotFoundError


def resolve_asset_dir(asset_dir: Path | str) -> Path:
  """Return the asset directory, or raise if it is missing or holds no files."""
  path = Path(asset_dir)
  if not path.is_dir():
    raise AssetSourceNotFoundError(f"Asset source not found: {path}")
  if not any(p.is_file() for p in path.rglob("*")):
    raise AssetSourceNotFoundError(f"Asset source not found (no files): {path}")
  return path


class AssetPublisher(Construct):
  """Mirrors a local directory into the bucket on every deploy.

  With a distribution given, CloudFront is invalidated once the upload
  completes so viewers see the new content.
  """

  def __init__(
    self,
    scope: Construct,
    id: str,
    *,
    asset_dir: Path | str,
    bucket: s3.IBucket,
    distribution: cloudfront.IDistribution | None = None,
    prune: bool = True,
  ) -> None:
    super().__init__(scope, id)

    self.source_dir = resolve_asset_dir(asset_dir)

    self.deployment = s3_deploy.BucketDeployment(
      self,
      "Deployment",
      sources=[s3_deploy.Source.asset(str(self.source_dir))],
      destination_bucket=bucket,
      prune=prune,
      distribution=distribution,
      distribution_paths=["/*"] if distribution else None,
    )
